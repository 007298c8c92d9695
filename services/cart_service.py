"""
Cart state for a single ordering session.

The cart is a tuple of CartLine values updated through tagged actions by a
pure reducer. Every change yields a new tuple, so comparing identities is
enough to detect a change.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
import logging

from pydantic import BaseModel, ConfigDict

from domain.enums import CartActionType
from domain.schemas.meal_schemas import MealItem
from domain.schemas.order_schemas import CartLine

logger = logging.getLogger("foodorder.cart")

CartState = Tuple[CartLine, ...]
CartItemInput = Union[MealItem, CartLine, Mapping[str, Any]]
CartListener = Callable[[CartState], None]


class CartAction(BaseModel):
    """A tagged cart command. ADD_ITEM carries the item data as given."""

    type: CartActionType
    item: Optional[Dict[str, Any]] = None
    id: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def add(cls, item: CartItemInput) -> "CartAction":
        data = _as_data(item)
        return cls(type=CartActionType.ADD_ITEM, item=data, id=data.get("id"))

    @classmethod
    def remove(cls, item_id: str) -> "CartAction":
        return cls(type=CartActionType.REMOVE_ITEM, id=item_id)

    @classmethod
    def clear(cls) -> "CartAction":
        return cls(type=CartActionType.CLEAR_CART)


def _as_data(item: CartItemInput) -> Dict[str, Any]:
    if isinstance(item, BaseModel):
        return item.model_dump()
    return dict(item)


def _to_line(data: Mapping[str, Any]) -> CartLine:
    """Build a quantity-1 line from item data; only a new line needs the full meal."""
    return CartLine.model_validate({**data, "quantity": 1})


def _index_of(state: CartState, item_id: str) -> int:
    for index, line in enumerate(state):
        if line.id == item_id:
            return index
    return -1


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    """
    Apply one action to the cart and return the new cart.

    - ADD_ITEM: bump the quantity of the line with the same id, keeping that
      line's own fields, or append the item with quantity 1
    - REMOVE_ITEM: decrement, drop the line at quantity 1, ignore unknown ids
    - CLEAR_CART: empty cart
    """
    if action.type == CartActionType.ADD_ITEM:
        index = _index_of(state, action.id)
        if index > -1:
            existing = state[index]
            updated = existing.model_copy(update={"quantity": existing.quantity + 1})
            return state[:index] + (updated,) + state[index + 1 :]
        return state + (_to_line(action.item),)

    if action.type == CartActionType.REMOVE_ITEM:
        index = _index_of(state, action.id)
        if index == -1:
            return state
        existing = state[index]
        if existing.quantity > 1:
            reduced = existing.model_copy(update={"quantity": existing.quantity - 1})
            return state[:index] + (reduced,) + state[index + 1 :]
        return state[:index] + state[index + 1 :]

    if action.type == CartActionType.CLEAR_CART:
        return ()

    return state


class CartStore:
    """
    Holder for the current cart state.

    Pass one instance to whatever needs the cart (checkout, header counters)
    instead of reaching for a module-level cart.
    """

    def __init__(self, items: Tuple[CartLine, ...] = ()):
        self._state: CartState = tuple(items)
        self._listeners: List[CartListener] = []

    @property
    def items(self) -> CartState:
        return self._state

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._state)

    @property
    def total_price(self) -> float:
        return sum((line.subtotal for line in self._state), 0.0)

    def is_empty(self) -> bool:
        return not self._state

    def dispatch(self, action: CartAction) -> CartState:
        """Run the reducer and notify listeners when the state object changed."""
        new_state = cart_reducer(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            logger.debug(
                "Cart %s -> %d lines, %d items",
                action.type.value,
                len(new_state),
                self.total_quantity,
            )
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def add_item(self, item: CartItemInput) -> CartState:
        return self.dispatch(CartAction.add(item))

    def remove_item(self, item_id: str) -> CartState:
        return self.dispatch(CartAction.remove(item_id))

    def clear_cart(self) -> CartState:
        return self.dispatch(CartAction.clear())

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def to_payload(self) -> List[dict]:
        """Cart lines as plain dicts, ready for an order body"""
        return [line.model_dump() for line in self._state]
