"""Which ordering step (cart, checkout or neither) is on screen"""

from domain.enums import UserProgress


class UserProgressState:
    def __init__(self, progress: UserProgress = UserProgress.NONE):
        self.progress = progress

    def show_cart(self) -> None:
        self.progress = UserProgress.CART

    def hide_cart(self) -> None:
        self.progress = UserProgress.NONE

    def show_checkout(self) -> None:
        self.progress = UserProgress.CHECKOUT

    def hide_checkout(self) -> None:
        self.hide_cart()

    @property
    def is_cart_open(self) -> bool:
        return self.progress == UserProgress.CART

    @property
    def is_checkout_open(self) -> bool:
        return self.progress == UserProgress.CHECKOUT
