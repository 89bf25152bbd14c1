# Ensure registration happens by importing modules
from .base import OfferRule, OfferResult, offer_registry, register  # noqa
from . import second_half_price  # noqa
