"""Client-side cart — an immutable value rebuilt on every operation.

A cart is never persisted. Each line carries a snapshot of the product taken
when it was added, so later catalog edits do not reach into an open cart.
Every mutating operation returns a new ``Cart`` and leaves the receiver
untouched, which is also what "rejected, no mutation" means here.
"""

from dataclasses import dataclass

from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String

from storefront.catalog.product import DEFAULT_UNIT
from storefront.domain import storefront

# Ceiling on the summed quantity of all lines. Units are not reconciled:
# 500 kg of apples plus 300 pieces of melon counts as 800.
WEIGHT_LIMIT = 800

_SNAPSHOT_FIELDS = ("product_id", "name", "unit_price", "unit", "min_order_increment", "quantity")


@storefront.value_object
class CartLine:
    """One product/quantity pairing with the product details frozen at add time."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    unit = String(max_length=20, default=DEFAULT_UNIT)
    min_order_increment = Integer(required=True, min_value=1)
    quantity = Integer(required=True, min_value=1)

    @classmethod
    def from_product(cls, product, quantity):
        return cls(
            product_id=str(product.id),
            name=product.name,
            unit_price=product.price,
            unit=product.unit or DEFAULT_UNIT,
            min_order_increment=product.min_order_increment,
            quantity=quantity,
        )

    @property
    def line_total(self):
        return self.unit_price * self.quantity

    @property
    def respects_increment(self):
        return self.quantity >= self.min_order_increment and self.quantity % self.min_order_increment == 0

    def with_quantity(self, quantity):
        return CartLine(
            product_id=self.product_id,
            name=self.name,
            unit_price=self.unit_price,
            unit=self.unit,
            min_order_increment=self.min_order_increment,
            quantity=quantity,
        )

    def snapshot(self):
        return {field: getattr(self, field) for field in _SNAPSHOT_FIELDS}


@dataclass(frozen=True)
class Cart:
    lines: tuple = ()

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    @classmethod
    def from_snapshot(cls, lines_data):
        """Rebuild a cart from a list of plain line dicts."""
        lines = []
        for data in lines_data or []:
            kwargs = {field: data[field] for field in _SNAPSHOT_FIELDS if data.get(field) is not None}
            if "unit_price" not in kwargs and data.get("price") is not None:
                kwargs["unit_price"] = data["price"]
            lines.append(CartLine(**kwargs))
        return cls(tuple(lines))

    def to_snapshot(self):
        return [line.snapshot() for line in self.lines]

    # -------------------------------------------------------------------
    # Queries (derived on every read)
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)

    @property
    def is_empty(self):
        return not self.lines

    @property
    def total_amount(self):
        return sum(line.line_total for line in self.lines)

    @property
    def total_quantity(self):
        return sum(line.quantity for line in self.lines)

    @property
    def is_over_limit(self):
        return self.total_quantity > WEIGHT_LIMIT

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_line(self, product, quantity):
        """Add ``quantity`` of ``product``, accumulating onto an existing line.

        The increment rule is not checked here; it is enforced by
        ``set_line_quantity`` and re-checked at submission.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        product_id = str(product.id)
        existing = self.line_for(product_id)
        if existing is None:
            return Cart(self.lines + (CartLine.from_product(product, quantity),))

        return self._replace_line(product_id, existing.with_quantity(existing.quantity + quantity))

    def set_line_quantity(self, product_id, quantity):
        """Replace a line's quantity; zero removes the line."""
        line = self.line_for(product_id)
        if line is None:
            raise ValidationError({"product_id": ["Product is not in the cart"]})

        if quantity == 0:
            return self.remove_line(product_id)

        increment = line.min_order_increment
        if quantity < increment:
            raise ValidationError({"quantity": [f"Quantity must be at least {increment}"]})
        if quantity % increment:
            raise ValidationError({"quantity": [f"Quantity must be a multiple of {increment}"]})

        return self._replace_line(product_id, line.with_quantity(quantity))

    def increase_line(self, product_id):
        """Step a line up by one increment."""
        line = self.line_for(product_id)
        if line is None:
            raise ValidationError({"product_id": ["Product is not in the cart"]})
        return self._replace_line(product_id, line.with_quantity(line.quantity + line.min_order_increment))

    def decrease_line(self, product_id):
        """Step a line down by one increment, never below the increment itself."""
        line = self.line_for(product_id)
        if line is None:
            raise ValidationError({"product_id": ["Product is not in the cart"]})

        new_quantity = line.quantity - line.min_order_increment
        if new_quantity < line.min_order_increment:
            return self
        return self._replace_line(product_id, line.with_quantity(new_quantity))

    def remove_line(self, product_id):
        return Cart(tuple(line for line in self.lines if str(line.product_id) != str(product_id)))

    def clear(self):
        return Cart()

    def add_bulk(self, result):
        """Add every matched entry of a ``BulkParseResult``."""
        cart = self
        for entry in result.matched:
            cart = cart.add_line(entry.product, entry.quantity)
        return cart

    def _replace_line(self, product_id, new_line):
        return Cart(tuple(new_line if str(line.product_id) == str(product_id) else line for line in self.lines))
