"""
Core calculation and display state machine logic.

Runs the pure half of the pipeline for a single trigger: quantity check,
rate lookup, conversion and formatting. The result decides whether the
result container is Hidden or Shown.
"""

import math

from ..conversion.converter import convert
from ..conversion.formatting import (
    compose_detail,
    format_fixed,
    format_localized,
    format_quantity_grouped,
)
from ..conversion.rates import RateResolver
from ..logging.config import get_state_logger, log_display_transition
from ..models.currency import CurrencyCode
from .models import DisplayResult, DisplayState, DisplayTransition, DisplayTrigger

state_logger = get_state_logger(__name__)


def build_display_result(
    quantity: float,
    code: CurrencyCode,
    resolver: RateResolver
) -> DisplayResult:
    """
    Convert a positive quantity and render every display string.

    Args:
        quantity: Validated Robux quantity (> 0)
        code: Selected currency
        resolver: Rate/symbol/locale lookups

    Returns:
        DisplayResult for the selected currency
    """
    tables = resolver.tables
    rate = resolver.resolve_rate(code)
    symbol = resolver.resolve_symbol(code)
    converted = convert(quantity, rate)

    fixed_value = format_fixed(converted)
    grouped_quantity = format_quantity_grouped(quantity, tables.default_locale)

    return DisplayResult(
        quantity=quantity,
        code=code,
        rate=rate,
        symbol=symbol,
        converted=converted,
        fixed_value=fixed_value,
        localized_value=format_localized(
            converted, code, tables.locales, tables.default_locale
        ),
        grouped_quantity=grouped_quantity,
        detail=compose_detail(grouped_quantity, tables.unit_name, symbol, fixed_value, code),
    )


def eval_display(
    current: DisplayState,
    quantity: float,
    code: CurrencyCode,
    resolver: RateResolver,
    trigger: DisplayTrigger
) -> DisplayTransition:
    """
    Decide the next display state for a trigger.

    A zero quantity (the normalized form of any invalid input) always
    leads to Hidden without calculating. So does a quantity whose
    conversion overflows to a non-finite value. Any other positive quantity
    leads to Shown with a freshly built result, even when already Shown.

    Args:
        current: Current display state
        quantity: Output of read_quantity
        code: Selected currency
        resolver: Rate/symbol/locale lookups
        trigger: Event that invoked the pipeline

    Returns:
        DisplayTransition describing the target state
    """
    if quantity <= 0 or not math.isfinite(convert(quantity, resolver.resolve_rate(code))):
        transition = DisplayTransition(new_state=DisplayState.HIDDEN, trigger=trigger)
    else:
        transition = DisplayTransition(
            new_state=DisplayState.SHOWN,
            trigger=trigger,
            result=build_display_result(quantity, code, resolver),
        )

    if transition.new_state != current:
        context = {"currency": code.value, "quantity": quantity}
        if transition.result is not None:
            context["converted"] = transition.result.converted
        log_display_transition(
            state_logger,
            from_state=current.value,
            to_state=transition.new_state.value,
            trigger=trigger.value,
            context=context,
        )

    return transition


def hide_display(current: DisplayState, trigger: DisplayTrigger) -> DisplayTransition:
    """Transition straight to Hidden, used when the field is cleared."""
    if current != DisplayState.HIDDEN:
        log_display_transition(
            state_logger,
            from_state=current.value,
            to_state=DisplayState.HIDDEN.value,
            trigger=trigger.value,
        )
    return DisplayTransition(new_state=DisplayState.HIDDEN, trigger=trigger)
