"""
View controllers: fetch from the store, aggregate, and hand view models to
the pages.

Controllers receive an explicit ``ViewContext``. Store failures are turned
into notifications here and never reach page rendering.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..analytics.aggregation import (
    build_dashboard_summary,
    category_breakdown,
    category_performance,
    growth_series,
    trend,
)
from ..analytics.comparison import available_periods, compare_periods
from ..analytics.title_table import SortColumn, TableSort, build_title_rows, sort_rows
from ..client import AssetsManagerClient
from ..exceptions import AssetsManagerError, AuthError, ValidationError
from ..models.analytics import (
    CategoryBreakdownItem,
    CategoryPerformance,
    ComparisonResult,
    DashboardSummary,
    GrowthPoint,
    StoreStats,
    TitleRow,
    TrendPoint,
)
from ..models.entry import FinancialEntry
from ..models.period import PeriodKey
from ..models.user import UserProfile
from ..services.error_handler import ErrorHandler, Notification
from ..utils.structured_logging import get_logger
from ..utils.validation_utils import PasswordStrength, ValidationUtils
from .forms import ParticularForm, build_amount_changes, build_entry

logger = get_logger(__name__)


class ViewState(str, Enum):
    READY = "ready"
    EMPTY = "empty"
    ERROR = "error"
    UNAUTHENTICATED = "unauthenticated"


@dataclass
class ViewContext:
    """What a controller needs: the store client and the signed-in user."""

    client: AssetsManagerClient
    user_id: Optional[str] = None
    email: Optional[str] = None
    error_handler: ErrorHandler = field(default_factory=ErrorHandler)

    @property
    def is_signed_in(self) -> bool:
        return self.client.is_authenticated

    def forget_session(self) -> None:
        self.client.token = None
        self.user_id = None
        self.email = None


@dataclass
class ActionResult:
    """Outcome of a user action (submit, edit, delete, sign in...)."""

    ok: bool = False
    value: Any = None
    notifications: List[Notification] = field(default_factory=list)
    field_errors: Dict[str, Notification] = field(default_factory=dict)

    @property
    def requires_sign_in(self) -> bool:
        return any(n.requires_sign_in for n in self.notifications)


@dataclass
class DashboardView:
    state: ViewState
    summary: DashboardSummary = field(default_factory=DashboardSummary)
    stats: Optional[StoreStats] = None
    entries: List[FinancialEntry] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return self.summary.has_data


@dataclass
class StatisticsView:
    state: ViewState
    distribution: List[CategoryBreakdownItem] = field(default_factory=list)
    performance: List[CategoryPerformance] = field(default_factory=list)
    trend: List[TrendPoint] = field(default_factory=list)
    growth: List[GrowthPoint] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)


@dataclass
class ComparisonView:
    state: ViewState
    periods: List[PeriodKey] = field(default_factory=list)
    result: Optional[ComparisonResult] = None
    notifications: List[Notification] = field(default_factory=list)


@dataclass
class ProfileView:
    state: ViewState
    profile: Optional[UserProfile] = None
    notifications: List[Notification] = field(default_factory=list)


class BaseController:
    def __init__(self, context: ViewContext):
        self.context = context
        self.client = context.client

    def _handle(self, exc: AssetsManagerError, operation: str) -> Notification:
        notification = self.context.error_handler.handle_exception(
            exc, context=operation, user_id=self.context.user_id
        )
        if isinstance(exc, AuthError):
            self.context.forget_session()
        return notification

    def _run(self, action: Callable[[], Any], operation: str, success: Optional[str] = None) -> ActionResult:
        """Run a store call; taxonomy errors become inline or toast notifications."""
        try:
            value = action()
        except AssetsManagerError as e:
            notification = self._handle(e, operation)
            result = ActionResult(ok=False)
            if notification.is_inline:
                result.field_errors[notification.field] = notification
            else:
                result.notifications.append(notification)
            return result
        notifications = [Notification.success(success)] if success else []
        return ActionResult(ok=True, value=value, notifications=notifications)

    def _load_entries(self, operation: str):
        """Fetch entries; returns ``(entries, notification)``."""
        try:
            return self.client.list(), None
        except AssetsManagerError as e:
            return [], self._handle(e, operation)

    @staticmethod
    def _failed_state(notification: Notification) -> ViewState:
        return ViewState.UNAUTHENTICATED if notification.requires_sign_in else ViewState.EMPTY


class DashboardController(BaseController):
    """Summary cards, charts and the latest-month particulars table."""

    def load(self) -> DashboardView:
        if not self.context.is_signed_in:
            return DashboardView(state=ViewState.UNAUTHENTICATED)
        try:
            data = self.client.fetch_dashboard_data()
        except AssetsManagerError as e:
            notification = self._handle(e, "dashboard.load")
            return DashboardView(state=self._failed_state(notification), notifications=[notification])

        summary = build_dashboard_summary(data.entries)
        logger.debug("Dashboard loaded", entries=summary.entry_count, operation="dashboard.load")
        return DashboardView(
            state=ViewState.READY if summary.has_data else ViewState.EMPTY,
            summary=summary,
            stats=data.stats,
            entries=data.entries,
        )

    @staticmethod
    def sorted_rows(view: DashboardView, sort: TableSort) -> List[TitleRow]:
        return sort_rows(view.summary.title_rows, sort)

    @staticmethod
    def next_sort(current: TableSort, column: SortColumn) -> TableSort:
        return current.toggle(column)


class StatisticsController(BaseController):
    def load(self) -> StatisticsView:
        if not self.context.is_signed_in:
            return StatisticsView(state=ViewState.UNAUTHENTICATED)
        entries, notification = self._load_entries("statistics.load")
        if notification:
            return StatisticsView(state=self._failed_state(notification), notifications=[notification])
        if not entries:
            return StatisticsView(state=ViewState.EMPTY)
        points = trend(entries)
        return StatisticsView(
            state=ViewState.READY,
            distribution=category_breakdown(entries),
            performance=category_performance(entries),
            trend=points,
            growth=growth_series(points),
        )


class ComparisonController(BaseController):
    def load(self, base: Optional[PeriodKey] = None, target: Optional[PeriodKey] = None) -> ComparisonView:
        """Compare two periods; defaults to the previous vs the latest period."""
        if not self.context.is_signed_in:
            return ComparisonView(state=ViewState.UNAUTHENTICATED)
        entries, notification = self._load_entries("comparison.load")
        if notification:
            return ComparisonView(state=self._failed_state(notification), notifications=[notification])

        periods = available_periods(entries)
        if not periods:
            return ComparisonView(state=ViewState.EMPTY)
        if len(periods) < 2 and (base is None or target is None):
            return ComparisonView(
                state=ViewState.READY,
                periods=periods,
                notifications=[Notification("Add particulars for at least two months to compare them.")],
            )

        target = target or periods[0]
        base = base or next((p for p in periods if p != target), periods[-1])
        if base == target:
            notification = self.context.error_handler.handle_exception(
                ValidationError("Choose two different periods", field="period"),
                context="comparison.load",
                user_id=self.context.user_id,
            )
            return ComparisonView(state=ViewState.READY, periods=periods, notifications=[notification])
        return ComparisonView(
            state=ViewState.READY,
            periods=periods,
            result=compare_periods(entries, base, target),
        )


class ParticularsController(BaseController):
    """Add, edit, delete and clear particulars."""

    def titles(self) -> ActionResult:
        result = self._run(self.client.titles, "particulars.titles")
        if not result.ok:
            result.value = []
        return result

    def submit(self, form: ParticularForm) -> ActionResult:
        built = build_entry(form)
        if not built.is_valid:
            return ActionResult(
                ok=False,
                field_errors=self.context.error_handler.handle_validation_errors(
                    built.errors, context="particulars.submit"
                ),
            )
        return self._run(
            lambda: self.client.create(built.payload),
            "particulars.submit",
            success="Financial particular has been added successfully.",
        )

    def latest_rows(self) -> ActionResult:
        """Latest-month rows; their ids drive edit and delete."""
        entries, notification = self._load_entries("particulars.latest_rows")
        if notification is not None:
            return ActionResult(ok=False, value=[], notifications=[notification])
        return ActionResult(ok=True, value=sort_rows(build_title_rows(entries)))

    def edit_row(self, row: TitleRow, amount: str, current_value: str = "") -> ActionResult:
        """Edit a row's holding from typed amounts."""
        changes, errors = build_amount_changes(row.category, amount, current_value)
        if errors:
            return ActionResult(
                ok=False,
                field_errors=self.context.error_handler.handle_validation_errors(
                    errors, context="particulars.edit"
                ),
            )
        return self.edit(row.id, changes)

    def edit(self, entry_id: str, changes: Dict[str, Any]) -> ActionResult:
        return self._run(
            lambda: self.client.update(entry_id, changes),
            "particulars.edit",
            success="Financial particular updated.",
        )

    def delete(self, entry_id: str) -> ActionResult:
        return self._run(
            lambda: self.client.delete(entry_id),
            "particulars.delete",
            success="Financial particular deleted.",
        )

    def clear_all(self) -> ActionResult:
        return self._run(
            self.client.clear_all,
            "particulars.clear_all",
            success="All financial data cleared.",
        )


class SettingsController(BaseController):
    def load(self) -> ProfileView:
        if not self.context.is_signed_in:
            return ProfileView(state=ViewState.UNAUTHENTICATED)
        result = self._run(self.client.get_profile, "settings.load")
        if not result.ok:
            state = ViewState.UNAUTHENTICATED if result.requires_sign_in else ViewState.ERROR
            return ProfileView(state=state, notifications=result.notifications)
        return ProfileView(state=ViewState.READY, profile=result.value)

    def update_profile(self, name: Optional[str] = None, username: Optional[str] = None) -> ActionResult:
        """A taken username comes back as an inline error on ``username``."""
        return self._run(
            lambda: self.client.update_profile(name=name, username=username),
            "settings.update_profile",
            success="Profile updated successfully.",
        )

    def delete_account(self) -> ActionResult:
        result = self._run(
            self.client.delete_account,
            "settings.delete_account",
            success="Your account has been deleted.",
        )
        if result.ok:
            self.context.forget_session()
        return result


class AuthController(BaseController):
    def sign_up(self, email: str, password: str, name: str, username: str) -> ActionResult:
        return self._run(
            lambda: self.client.sign_up(email, password, name, username),
            "auth.sign_up",
            success="Account created. You can sign in now.",
        )

    def sign_in(self, email: str, password: str) -> ActionResult:
        result = self._run(
            lambda: self.client.sign_in(email, password),
            "auth.sign_in",
            success="Signed in successfully.",
        )
        if result.ok:
            self.context.user_id = result.value.user_id
            self.context.email = email.strip().lower()
        return result

    def sign_out(self) -> ActionResult:
        result = self._run(self.client.sign_out, "auth.sign_out", success="Signed out.")
        self.context.forget_session()
        return result

    @staticmethod
    def password_strength(password: str) -> PasswordStrength:
        return ValidationUtils.password_strength(password)


__all__ = [
    "ActionResult",
    "AuthController",
    "ComparisonController",
    "ComparisonView",
    "DashboardController",
    "DashboardView",
    "ParticularsController",
    "ProfileView",
    "SettingsController",
    "StatisticsController",
    "StatisticsView",
    "ViewContext",
    "ViewState",
]
