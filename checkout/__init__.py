from checkout.engine.basket import Basket  # noqa: F401
from checkout.engine.errors import InvalidProductCode  # noqa: F401
