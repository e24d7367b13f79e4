"""Fulfillment status rules for orders.

Status is a closed set; that part is never negotiable. Whether a change must
also follow the fulfillment graph depends on the transition policy:

    Accepted → Processing → InDelivery → Completed
    Accepted | Processing | InDelivery → Cancelled

``GUARDED`` enforces the graph. ``FREE`` only enforces enum closure and lets an
administrator assign any status from any status, which is how the storefront
behaved before the graph existed. The active policy is read from
``STOREFRONT_STATUS_POLICY`` (``guarded`` by default).
"""

import os
from enum import Enum

from protean.exceptions import ValidationError

STATUS_POLICY_ENV = "STOREFRONT_STATUS_POLICY"


class OrderStatus(Enum):
    ACCEPTED = "Accepted"
    PROCESSING = "Processing"
    IN_DELIVERY = "InDelivery"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderSource(Enum):
    WEB = "web"
    EXTERNAL_CHANNEL = "external-channel"


class TransitionPolicy(Enum):
    FREE = "free"
    GUARDED = "guarded"


# Storefront display labels; storage always uses the enum value
STATUS_LABELS = {
    OrderStatus.ACCEPTED: "Принят",
    OrderStatus.PROCESSING: "В обработке",
    OrderStatus.IN_DELIVERY: "В доставке",
    OrderStatus.COMPLETED: "Завершен",
    OrderStatus.CANCELLED: "Отменен",
}

_VALID_TRANSITIONS = {
    OrderStatus.ACCEPTED: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.IN_DELIVERY, OrderStatus.CANCELLED},
    OrderStatus.IN_DELIVERY: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

TERMINAL_STATES = frozenset(s for s, targets in _VALID_TRANSITIONS.items() if not targets)


def parse_status(value):
    """Return the ``OrderStatus`` for ``value`` or raise ``ValidationError``."""
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError({"status": [f"Unknown order status {value!r}. Allowed: {allowed}"]}) from None


def status_label(value):
    return STATUS_LABELS[parse_status(value)]


def allowed_targets(current, policy=TransitionPolicy.GUARDED):
    current = parse_status(current)
    if TransitionPolicy(policy) == TransitionPolicy.FREE:
        return set(OrderStatus)
    return set(_VALID_TRANSITIONS[current])


def assert_can_transition(current, target, policy=TransitionPolicy.GUARDED):
    """Raise ``ValidationError`` unless ``current`` may move to ``target``."""
    current = parse_status(current)
    target = parse_status(target)
    if target not in allowed_targets(current, policy):
        raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})


def configured_policy():
    """Read the transition policy from the environment."""
    raw = os.getenv(STATUS_POLICY_ENV, TransitionPolicy.GUARDED.value).strip().lower()
    try:
        return TransitionPolicy(raw)
    except ValueError:
        raise ValidationError({"policy": [f"Unknown status transition policy {raw!r}"]}) from None
