"""Product snapshot as seen by the order core.

The catalog owns products and their lifecycle. Orders only ever read a
snapshot and copy the price out of it, so the model is frozen: a price
or status change produces a new Product via ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:

    id: str
    name: str
    price: Money
    active: bool = True
    code: str = ""
    description: str = ""
