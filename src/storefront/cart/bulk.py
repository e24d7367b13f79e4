"""Bulk list entry — turn pasted ``name:quantity`` lines into cart additions.

Each non-blank line is parsed independently. A quantity may carry a trailing
unit (``огурцы:10 кг``); the unit text is ignored. Lines that cannot be
matched to exactly one catalog product, or whose quantity does not respect
the product's minimum increment, are reported back instead of added.
"""

import re
from dataclasses import dataclass

_QUANTITY_PATTERN = re.compile(r"^\s*(\d+)\s*[^\d\s]*\s*$")


@dataclass(frozen=True)
class BulkEntry:
    product: object
    quantity: int
    source_line: str


@dataclass(frozen=True)
class BulkParseResult:
    matched: tuple = ()
    failed: tuple = ()

    @property
    def succeeded(self):
        return tuple(entry.source_line for entry in self.matched)


def _match_product(token, products):
    exact = [p for p in products if p.name.lower() == token]
    if exact:
        return exact
    return [p for p in products if token in p.name.lower() or p.name.lower() in token]


def parse_bulk_order(text, products):
    """Parse ``text`` against ``products`` and return a ``BulkParseResult``."""
    products = list(products)
    matched = []
    failed = []

    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if ":" not in line:
            failed.append(f"{line} - invalid format, expected name:quantity")
            continue

        name_part, quantity_part = line.split(":", 1)
        token = name_part.strip().lower()
        if not token:
            failed.append(f"{line} - product name missing")
            continue

        candidates = _match_product(token, products)
        if not candidates:
            failed.append(f"{line} - product not found")
            continue
        if len(candidates) > 1:
            failed.append(f"{line} - ambiguous product name")
            continue
        product = candidates[0]

        match = _QUANTITY_PATTERN.match(quantity_part)
        if not match:
            failed.append(f"{line} - invalid quantity")
            continue

        quantity = int(match.group(1))
        increment = product.min_order_increment
        if quantity < increment or quantity % increment:
            failed.append(f"{line} - quantity must be a multiple of {increment}")
            continue

        matched.append(BulkEntry(product=product, quantity=quantity, source_line=line))

    return BulkParseResult(matched=tuple(matched), failed=tuple(failed))
