"""Display aggregates computed by reducing already-fetched record lists.

Amounts arrive from the backend as decimal strings (e.g. ``"12000.00"``);
missing or unparsable values count as zero.
"""

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Parse an amount leniently: ``None``, ``""`` and garbage become 0."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not result.is_finite():
        return ZERO
    return result


def sum_field(records: Iterable[Any], attr: str) -> Decimal:
    return sum((to_decimal(getattr(r, attr, None)) for r in records), ZERO)


def count_by(records: Iterable[Any], attr: str) -> dict[Hashable, int]:
    """Occurrences of each value of ``attr`` across ``records``."""
    return dict(Counter(getattr(r, attr, None) for r in records))


def filter_by(records: Iterable[Any], attr: str, *values: Any) -> list[Any]:
    return [r for r in records if getattr(r, attr, None) in values]


@dataclass
class AgencySalesSummary:
    total_sales: Decimal = ZERO
    total_commission: Decimal = ZERO
    approved_count: int = 0
    sale_count: int = 0
    by_agency: dict[str, Decimal] = field(default_factory=dict)


def summarize_agency_sales(sales: Sequence[Any]) -> AgencySalesSummary:
    """Totals shown above the agency sales table."""
    by_agency: dict[str, Decimal] = {}
    for sale in sales:
        agency_id = getattr(sale, "agency_id", None)
        if agency_id is None:
            continue
        key = str(agency_id)
        by_agency[key] = by_agency.get(key, ZERO) + to_decimal(sale.amount)

    return AgencySalesSummary(
        total_sales=sum_field(sales, "amount"),
        total_commission=sum_field(sales, "commission"),
        approved_count=len(filter_by(sales, "status", "approved", "paid")),
        sale_count=len(sales),
        by_agency=by_agency,
    )


@dataclass
class SalesTotals:
    revenue: Decimal = ZERO
    expenses: Decimal = ZERO

    @property
    def profit(self) -> Decimal:
        return self.revenue - self.expenses


def totals_for_sales(
    sales: Iterable[Any],
    *,
    start: datetime | None = None,
    end: datetime | None = None,
) -> SalesTotals:
    """Revenue vs. expense totals, optionally limited to a sale-date window.

    Entries typed neither ``revenue`` nor ``expense`` are ignored.
    """
    totals = SalesTotals()
    for sale in sales:
        sale_date = getattr(sale, "sale_date", None)
        if sale_date is not None:
            if start is not None and utc_naive(sale_date) < utc_naive(start):
                continue
            if end is not None and utc_naive(sale_date) > utc_naive(end):
                continue
        amount = to_decimal(getattr(sale, "amount", None))
        sale_type = getattr(sale, "type", None)
        if sale_type == "revenue":
            totals.revenue += amount
        elif sale_type == "expense":
            totals.expenses += amount
    return totals


def combine_totals(totals: Iterable[SalesTotals]) -> SalesTotals:
    combined = SalesTotals()
    for item in totals:
        combined.revenue += item.revenue
        combined.expenses += item.expenses
    return combined


@dataclass
class ClientSummary:
    total_billed: Decimal = ZERO
    pending_amount: Decimal = ZERO
    active_projects: int = 0
    project_count: int = 0
    invoice_count: int = 0


def summarize_client(
    client_id: Any,
    projects: Sequence[Any],
    invoices: Sequence[Any],
) -> ClientSummary:
    """Per-client card figures: billed total, pending amount, active projects."""
    own_projects = [p for p in projects if _same_id(p.client_id, client_id)]
    own_invoices = [i for i in invoices if _same_id(i.client_id, client_id)]
    return ClientSummary(
        total_billed=sum_field(own_invoices, "amount"),
        pending_amount=sum_field(filter_by(own_invoices, "status", "pending"), "amount"),
        active_projects=len(filter_by(own_projects, "status", "active")),
        project_count=len(own_projects),
        invoice_count=len(own_invoices),
    )


@dataclass
class PayrollSummary:
    month: str | None = None
    salary_count: int = 0
    total_base_salary: Decimal = ZERO
    total_allowances: Decimal = ZERO
    total_deductions: Decimal = ZERO
    total_net_salary: Decimal = ZERO
    shift_count: int = 0
    shift_hours: Decimal = ZERO
    advance_pending: Decimal = ZERO
    advance_approved: Decimal = ZERO


def net_salary(salary: Any) -> Decimal:
    """Explicit net pay when recorded, otherwise base + allowances - deductions."""
    explicit = getattr(salary, "net_salary", None)
    if explicit not in (None, ""):
        return to_decimal(explicit)
    return (
        to_decimal(getattr(salary, "base_salary", None))
        + to_decimal(getattr(salary, "allowances", None))
        - to_decimal(getattr(salary, "deductions", None))
    )


def shift_hours(shift: Any) -> Decimal:
    """Worked hours for a shift (``HH:MM`` times, overnight allowed, minus break)."""
    start = _minutes(getattr(shift, "start_time", None))
    end = _minutes(getattr(shift, "end_time", None))
    if start is None or end is None:
        return ZERO
    if end < start:
        end += 24 * 60
    worked = end - start - int(getattr(shift, "break_minutes", None) or 0)
    if worked <= 0:
        return ZERO
    return (Decimal(worked) / Decimal(60)).quantize(Decimal("0.01"))


def summarize_payroll(
    salaries: Sequence[Any],
    shifts: Sequence[Any],
    advances: Sequence[Any],
    *,
    month: str | None = None,
) -> PayrollSummary:
    """Monthly payroll figures; ``month`` is ``YYYY-MM`` or ``None`` for all."""
    if month:
        salaries = [s for s in salaries if (getattr(s, "month", None) or "") == month]
        shifts = [s for s in shifts if _month_of(getattr(s, "date", None)) == month]
        advances = [
            a for a in advances
            if _month_of(getattr(a, "request_date", None)) in (month, None)
        ]

    return PayrollSummary(
        month=month,
        salary_count=len(salaries),
        total_base_salary=sum_field(salaries, "base_salary"),
        total_allowances=sum_field(salaries, "allowances"),
        total_deductions=sum_field(salaries, "deductions"),
        total_net_salary=sum((net_salary(s) for s in salaries), ZERO),
        shift_count=len(shifts),
        shift_hours=sum((shift_hours(s) for s in shifts), ZERO),
        advance_pending=sum_field(filter_by(advances, "status", "pending"), "amount"),
        advance_approved=sum_field(filter_by(advances, "status", "approved", "paid"), "amount"),
    )


def _same_id(left: Any, right: Any) -> bool:
    return left is not None and str(left) == str(right)


def utc_naive(value: datetime) -> datetime:
    """Aware values are converted to UTC; naive ones are taken as UTC already."""
    return value.astimezone(timezone.utc).replace(tzinfo=None) if value.tzinfo else value


def _minutes(value: str | None) -> int | None:
    if not value:
        return None
    try:
        hours, minutes = value.split(":")[:2]
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return None


def _month_of(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.strftime("%Y-%m")
    if hasattr(value, "strftime"):
        return value.strftime("%Y-%m")
    return str(value)[:7]
