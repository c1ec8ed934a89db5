"""
Main conversion widget coordinator.

Orchestrates the conversion pipeline, coordinating input reading, rate
lookup, conversion, formatting and presentation for every UI trigger.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from .config.loader import ConfigLoader
from .conversion.quantity import read_quantity
from .conversion.rates import RateResolver, to_currency_code
from .events import TriggerDispatcher
from .logging.config import get_selection_logger, log_selection_change
from .models.currency import CurrencyCode, CurrencyTables
from .presenter import ResultPresenter
from .state.machine import eval_display, hide_display
from .state.models import AppState, DisplayState, DisplayTransition, DisplayTrigger
from .ui.base import BaseWidgetSurface

logger = structlog.get_logger(__name__)
selection_logger = get_selection_logger(__name__)


class DevExWidget:
    """
    Main coordinator for the Robux to real currency conversion widget.

    Manages the conversion pipeline:
    Input → Rate Lookup → Conversion → Formatting → Presentation
    """

    def __init__(
        self,
        surface: BaseWidgetSurface,
        tables: Optional[CurrencyTables] = None,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """
        Initialize the widget.

        Args:
            surface: UI surface to read from and write to
            tables: Currency tables; loaded from configuration when omitted
            config_dir: Directory holding currencies.yaml overrides
        """
        self.logger = logger
        self.surface = surface

        if tables is None:
            tables = ConfigLoader.create(Path(config_dir) if config_dir else None).load_tables()

        self.tables = tables
        self.resolver = RateResolver(tables)
        self.state = AppState()
        self.presenter = ResultPresenter(surface, self.state)
        self.dispatcher = TriggerDispatcher(self)
        self.started = False

        self.logger.info(
            "DevEx widget initialized",
            surface=surface.name,
            currencies=len(tables.rates)
        )

    @property
    def display_state(self) -> DisplayState:
        return self.state.display

    @property
    def selected(self) -> CurrencyCode:
        return self.state.selected

    def start(self) -> None:
        """
        Read the initial selection, render readouts and wire triggers.

        Raises:
            UnknownCurrencyError: if the selector holds an unconfigured code
        """
        if self.started:
            return

        self.change_selection(self.surface.read_selected_code(), DisplayTrigger.STARTUP)
        self.dispatcher.wire()
        self.started = True

        self.logger.info("DevEx widget started", currency=self.state.selected.value)

    def stop(self) -> None:
        """Unbind every trigger from the surface."""
        if not self.started:
            return

        self.surface.unbind_all()
        self.started = False

        self.logger.info("DevEx widget stopped", surface=self.surface.name)

    def perform_calculation(
        self,
        trigger: DisplayTrigger = DisplayTrigger.ACTIVATE
    ) -> DisplayTransition:
        """
        Run the full pipeline against the current input and selection.

        Args:
            trigger: Event that invoked the pipeline

        Returns:
            The applied display transition
        """
        quantity = read_quantity(self.surface.read_quantity_text())
        transition = eval_display(
            self.state.display,
            quantity,
            self.state.selected,
            self.resolver,
            trigger,
        )
        self.presenter.apply(transition)
        return transition

    def hide_result(self, trigger: DisplayTrigger) -> DisplayTransition:
        """Hide the result container without calculating."""
        transition = hide_display(self.state.display, trigger)
        self.presenter.apply(transition)
        return transition

    def change_selection(
        self,
        code: Union[str, CurrencyCode],
        trigger: DisplayTrigger = DisplayTrigger.SELECTION_CHANGE
    ) -> None:
        """
        Switch the selected currency.

        Readouts are refreshed unconditionally; the result is recalculated
        only when the input holds a valid positive quantity.

        Args:
            code: Newly selected currency code
            trigger: SELECTION_CHANGE, or STARTUP for the initial selection
        """
        currency = to_currency_code(code)
        previous = self.state.select(currency)
        rate = self.resolver.resolve_rate(currency)

        self.presenter.refresh_readouts(
            currency,
            rate,
            self.resolver.resolve_symbol(currency),
        )

        recalculate = read_quantity(self.surface.read_quantity_text()) > 0
        if recalculate:
            self.perform_calculation(trigger)

        log_selection_change(
            selection_logger,
            from_code=previous.value if trigger != DisplayTrigger.STARTUP else None,
            to_code=currency.value,
            rate=rate,
            recalculated=recalculate,
        )
