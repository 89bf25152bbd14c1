from __future__ import annotations


class InvalidProductCode(ValueError):
    """
    Raised by Basket.add when the code is not in the catalog.
    The basket is left unchanged.
    """

    def __init__(self, code: str):
        self.code = str(code)
        super().__init__(f"Invalid product code: {self.code}")
