"""Domain models - pure Python dataclasses representing dealership finance entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass
class RawTransactionRow:
    """One row of dealership activity as imported from the operations sheet"""

    ticket_id: str
    operation_date: Optional[date] = None
    client_code: str = ""
    client_name: str = ""
    salesperson: str = ""
    product: str = ""  # empty means the row carries no sale
    quantity: float = 0
    unit_price: float = 0
    line_total: float = 0
    used_item: str = ""
    used_item_value: float = 0
    chassis_engine: str = ""
    payment_method: str = ""
    payment_date: Optional[date] = None  # None means not a payment row
    receipt: str = ""
    installment: str = ""
    instrument: str = ""  # check, transfer, withholding...
    check_due_date: Optional[date] = None
    exchange_rate: float = 0
    amount_ars: float = 0
    amount_usd: float = 0
    running_balance_hint: float = 0  # informational, never trusted
    final_balance_hint: Optional[float] = None
    note: str = ""


def is_sale_row(row: RawTransactionRow) -> bool:
    """A row sells something when it names a product"""
    return bool(row.product)


def is_payment_row(row: RawTransactionRow) -> bool:
    """A row records a payment when it has a payment date and a positive USD amount"""
    return row.payment_date is not None and row.amount_usd > 0


@dataclass
class UsedItem:
    """Trade-in received as part of a sale"""

    description: str
    value: float


@dataclass
class Product:
    """Sale line within a ticket"""

    id: str
    description: str
    quantity: float
    unit_price: float
    total_price: float
    used_item: Optional[UsedItem] = None


@dataclass
class Payment:
    """Payment line within a ticket, with the balance left after it"""

    id: str
    date: date
    detail: str
    receipt_number: str
    amount_ars: float
    exchange_rate: float
    amount_usd: float
    running_balance: float
    check_due_date: Optional[date] = None


@dataclass
class Ticket:
    """Reconstructed sales transaction (boleto)"""

    ticket_id: str
    client_code: str
    client_name: str
    operation_date: Optional[date]
    payment_method: str
    observations: str
    products: List[Product]
    payments: List[Payment]
    total_sale: float
    total_used: float
    initial_balance: float
    total_payments: float
    final_balance: float


@dataclass
class TicketSummary:
    """Per-ticket line of a client summary"""

    ticket_id: str
    client_name: str
    sale_usd: float
    used_usd: float
    initial_balance: float
    payments_usd: float
    final_balance: float
    status: str  # saldado | pendiente | proceso


@dataclass
class ClientSummary:
    """Rollup of every ticket held by one client"""

    client_code: str
    client_name: str
    tickets: List[TicketSummary]
    total_sale: float
    total_used: float
    total_payments: float
    total_balance: float


@dataclass
class TotalByTicket:
    """Flat totals row: cliente | boleto | venta | usados | pagos | saldo"""

    client_name: str
    ticket_id: str
    venta_usd: float
    usados_usd: float
    pagos_usd: float
    saldo_final: float


@dataclass
class DebtAgingItem:
    """Unpaid or partially paid ticket with its age"""

    ticket_id: str
    client_code: str
    client_name: str
    operation_date: Optional[date]
    total_sale: float
    total_used: float
    total_payments: float
    balance: float
    days_overdue: int
    aging_bucket: str  # 0-30 | 31-60 | 61-90 | 90+


@dataclass
class AgingBucketSummary:
    """Balance total and ticket count for one aging bucket"""

    total: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class RateEntry:
    """Row of the statutory interest rate table, valid for [valid_from, valid_to]"""

    valid_from: date
    valid_to: date
    resarcitorio_monthly: float
    resarcitorio_daily: float
    punitorio_monthly: float
    punitorio_daily: float
    norm: str = ""  # resolution that published the rate


@dataclass
class AccrualPeriod:
    """Sub-period of an interest calculation with a single applicable rate entry"""

    start: date
    end: date  # exclusive
    days: int
    resarcitorio_daily_rate: float
    resarcitorio_interest: float
    punitorio_daily_rate: float
    punitorio_interest: float
    norm: str = ""


@dataclass
class InterestAccrual:
    """Result of accruing statutory interest over a date range"""

    principal: float
    from_date: date
    to_date: date
    total_days: int
    resarcitorio_total: float
    punitorio_total: float
    total_interest: float
    total_payable: float
    periods: List[AccrualPeriod]


@dataclass
class RateCalculations:
    """Rate conversions derived from a nominal annual rate"""

    tna: float
    tem: float
    tea: float
    periodic_rate: float
    periods_per_year: int


@dataclass
class AmortizationRow:
    """Single period of a French-system schedule"""

    period: int
    beginning_balance: float
    payment: float
    principal: float
    interest: float
    tax: float
    total_payment: float
    ending_balance: float


@dataclass
class AmortizationTotals:
    """Column sums of an amortization schedule"""

    payment: float
    principal: float
    interest: float
    tax: float
    total_payment: float


@dataclass
class PlanInstallment:
    """Single installment of a refinancing plan"""

    number: int
    due_date: date
    principal: float
    interest: float
    amount: float
    remaining_balance: float


@dataclass
class RefinancingProposal:
    """Candidate repayment proposal (cuotas x direct monthly rate)"""

    installments: int
    monthly_rate: float
    plan: List[PlanInstallment]
    debt_in_pesos: float
    interest_total: float
    total_payable: float
    installment_amount: float
    coefficient: float


@dataclass
class InflationMonth:
    """One month of a compounding walk"""

    year: int
    month: int
    inflation: float
    accumulated: float  # percent accumulated up to and including this month


@dataclass
class InflationResult:
    """Compounded inflation over a month range"""

    total_percent: float
    avg_monthly_percent: float
    annualized_percent: float
    multiplier: float
    months_counted: int
    per_month: List[InflationMonth]

    def adjust(self, amount: float) -> float:
        """Amount restated to the end of the range"""
        return amount * self.multiplier


@dataclass
class FuturePayment:
    """Scheduled collection (post-dated check or payment) not yet due"""

    ticket_id: str
    client_code: str
    client_name: str
    due_date: date
    detail: str
    receipt_number: str
    amount_usd: float
    amount_ars: float


@dataclass
class MonthlyPaymentSummary:
    """Scheduled collections grouped by calendar month"""

    year: int
    month: int
    payments: List[FuturePayment]
    total_usd: float
    total_ars: float
    count: int


@dataclass
class PendingBalance:
    """Outstanding balance owed by one client"""

    client_code: str
    client_name: str
    tickets: List[str]
    total_pending: float


@dataclass
class TicketSearchResult:
    """Outcome of a free-text ticket/client search"""

    kind: str  # ticket | client | not_found
    tickets: List[Ticket] = field(default_factory=list)
    client_name: Optional[str] = None


@dataclass
class ExchangeRate:
    """Official USD quote from the FX API"""

    buy: float
    sell: float
    updated_at: Optional[str] = None


AgingSummary = Dict[str, AgingBucketSummary]
