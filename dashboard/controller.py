"""
Dashboard controller: owns the domain input and the view state, and runs
lookups against the analysis proxy.
"""

import logging
import threading
from typing import Any, Mapping, Optional

from dashboard.state import DashboardState, Failed, Idle, Loading, Success, error_message, is_loading

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Failed to analyze domain"


class DashboardController:
    """
    State holder for one dashboard session.

    Every lookup receives a sequence token. Only the most recently issued
    lookup may settle the state; responses that arrive for superseded lookups
    are dropped, so overlapping requests never overwrite a newer result.
    """

    def __init__(self, api_client, domain: str = ""):
        """
        Args:
            api_client: object with an ``analyze(domain)`` method returning the
                decoded proxy body (see ``dashboard.client.ProxyClient``)
            domain: initial text of the domain input
        """
        self.api_client = api_client
        self.domain = domain
        self._state: DashboardState = Idle()
        self._sequence = 0
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> DashboardState:
        with self._lock:
            return self._state

    @property
    def loading(self) -> bool:
        return is_loading(self.state)

    @property
    def error(self) -> Optional[str]:
        return error_message(self.state)

    @property
    def report(self) -> Optional[Mapping[str, Any]]:
        return self.state.report

    def set_domain(self, text: str):
        self.domain = text

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def submit_lookup(self) -> bool:
        """
        Run one lookup for the current domain input.

        Returns:
            False when the trimmed input is empty (nothing happens), True otherwise.
        """
        domain = self.domain.strip()
        if not domain:
            return False

        token = self._begin()
        outcome: Optional[DashboardState] = None
        try:
            body = self.api_client.analyze(domain)
            outcome = self._interpret(body)
        except Exception as e:
            logger.error(f"Failed to analyze domain {domain}: {e}", exc_info=True)
            outcome = Failed(str(e) or FALLBACK_ERROR)
        finally:
            self._settle(token, outcome)
        return True

    def _begin(self) -> int:
        with self._lock:
            self._sequence += 1
            self._state = Loading(self._state.report)
            return self._sequence

    @staticmethod
    def _interpret(body: Any) -> DashboardState:
        if not isinstance(body, Mapping):
            raise ValueError("Unexpected response from analysis service")
        if body.get("error"):
            return Failed(str(body["error"]))
        return Success(body)

    def _settle(self, token: int, outcome: Optional[DashboardState]) -> bool:
        with self._lock:
            if token != self._sequence:
                logger.debug(f"Discarding response of superseded lookup #{token}")
                return False

            previous = self._state.report
            if isinstance(outcome, Success):
                self._state = outcome
            elif isinstance(outcome, Failed):
                self._state = Failed(outcome.message, previous)
            else:
                # Interrupted before an outcome was produced
                self._state = Failed(FALLBACK_ERROR, previous)
            return True
