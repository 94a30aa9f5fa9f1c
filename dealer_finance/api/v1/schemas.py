"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import Dict, List, Literal, Optional

from dealer_finance.domain.models import RawTransactionRow


class Schema(BaseModel):
    """Base schema; also validates from domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


# --- Operations import ---

class OperationRowSchema(Schema):
    """One operations sheet row. Rows without ticket_id are ignored by the ledger."""

    ticket_id: str = ""
    operation_date: Optional[date] = None
    client_code: str = ""
    client_name: str = ""
    salesperson: str = ""
    product: str = ""
    quantity: float = 0
    unit_price: float = 0
    line_total: float = 0
    used_item: str = ""
    used_item_value: float = 0
    chassis_engine: str = ""
    payment_method: str = ""
    payment_date: Optional[date] = None
    receipt: str = ""
    installment: str = ""
    instrument: str = ""
    check_due_date: Optional[date] = None
    exchange_rate: float = 0
    amount_ars: float = 0
    amount_usd: float = 0
    running_balance_hint: float = 0
    final_balance_hint: Optional[float] = None
    note: str = ""

    def to_domain(self) -> RawTransactionRow:
        return RawTransactionRow(**self.model_dump())


class ImportRequest(Schema):
    """Request body for PUT /v1/operations"""

    rows: List[OperationRowSchema]


class ImportResponse(Schema):
    """Response for PUT /v1/operations"""

    stored: int
    tickets: int


# --- Tickets ---

class UsedItemSchema(Schema):
    description: str
    value: float


class ProductSchema(Schema):
    id: str
    description: str
    quantity: float
    unit_price: float
    total_price: float
    used_item: Optional[UsedItemSchema] = None


class PaymentSchema(Schema):
    id: str
    date: date
    detail: str
    receipt_number: str
    check_due_date: Optional[date] = None
    amount_ars: float
    exchange_rate: float
    amount_usd: float
    running_balance: float


class TicketSchema(Schema):
    """Reconstructed ticket with products, payments and balances"""

    ticket_id: str
    client_code: str
    client_name: str
    operation_date: Optional[date] = None
    payment_method: str
    observations: str
    products: List[ProductSchema]
    payments: List[PaymentSchema]
    total_sale: float
    total_used: float
    initial_balance: float
    total_payments: float
    final_balance: float


class TotalByTicketSchema(Schema):
    client_name: str
    ticket_id: str
    venta_usd: float
    usados_usd: float
    pagos_usd: float
    saldo_final: float


class TicketSummarySchema(Schema):
    ticket_id: str
    client_name: str
    sale_usd: float
    used_usd: float
    initial_balance: float
    payments_usd: float
    final_balance: float
    status: Literal["saldado", "pendiente", "proceso"]


class ClientSummarySchema(Schema):
    """Response for GET /v1/clients/{client_code}/summary"""

    client_code: str
    client_name: str
    tickets: List[TicketSummarySchema]
    total_sale: float
    total_used: float
    total_payments: float
    total_balance: float


class SearchResponse(Schema):
    """Response for GET /v1/tickets/search"""

    kind: Literal["ticket", "client", "not_found"]
    tickets: List[TicketSchema]
    client_name: Optional[str] = None


# --- Aging and projections ---

class DebtAgingItemSchema(Schema):
    ticket_id: str
    client_code: str
    client_name: str
    operation_date: Optional[date] = None
    total_sale: float
    total_used: float
    total_payments: float
    balance: float
    days_overdue: int
    aging_bucket: Literal["0-30", "31-60", "61-90", "90+"]


class AgingBucketSchema(Schema):
    total: float
    count: int


class AgingResponse(Schema):
    """Response for GET /v1/aging and /v1/aging/without-payments"""

    as_of: date
    items: List[DebtAgingItemSchema]
    total_balance: float


class AgingSummaryResponse(Schema):
    """Response for GET /v1/aging/summary"""

    as_of: date
    buckets: Dict[str, AgingBucketSchema]


class FuturePaymentSchema(Schema):
    ticket_id: str
    client_code: str
    client_name: str
    due_date: date
    detail: str
    receipt_number: str
    amount_usd: float
    amount_ars: float


class MonthlyPaymentSchema(Schema):
    year: int
    month: int
    payments: List[FuturePaymentSchema]
    total_usd: float
    total_ars: float
    count: int


class PaymentProjectionResponse(Schema):
    """Response for GET /v1/projections/payments"""

    as_of: date
    payments: List[FuturePaymentSchema]
    months: List[MonthlyPaymentSchema]


class PendingBalanceSchema(Schema):
    client_code: str
    client_name: str
    tickets: List[str]
    total_pending: float


# --- Calculators ---

Periodicity = Literal["monthly", "bimonthly", "quarterly", "semiannual", "annual"]


class AmortizationRequest(Schema):
    """Request body for POST /v1/calculators/amortization"""

    capital: float = Field(..., gt=0, description="Amount financed")
    periods: int = Field(..., gt=0, le=600, description="Number of installments")
    tna: float = Field(..., ge=0, description="Nominal annual rate, %")
    periodicity: Periodicity = "monthly"
    include_tax: bool = False
    tax_rate: float = Field(10.5, ge=0, description="IVA on interest, %")


class RateCalculationsSchema(Schema):
    tna: float
    tem: float
    tea: float
    periodic_rate: float
    periods_per_year: int


class AmortizationRowSchema(Schema):
    period: int
    beginning_balance: float
    payment: float
    principal: float
    interest: float
    tax: float
    total_payment: float
    ending_balance: float


class AmortizationTotalsSchema(Schema):
    payment: float
    principal: float
    interest: float
    tax: float
    total_payment: float


class AmortizationResponse(Schema):
    """Response for POST /v1/calculators/amortization"""

    rates: RateCalculationsSchema
    schedule: List[AmortizationRowSchema]
    totals: AmortizationTotalsSchema


class InterestRequest(Schema):
    """Request body for POST /v1/calculators/interest"""

    principal: float = Field(..., gt=0, description="Amount owed")
    from_date: date
    to_date: date


class AccrualPeriodSchema(Schema):
    start: date
    end: date
    days: int
    resarcitorio_daily_rate: float
    resarcitorio_interest: float
    punitorio_daily_rate: float
    punitorio_interest: float
    norm: str


class InterestResponse(Schema):
    """Response for POST /v1/calculators/interest"""

    principal: float
    from_date: date
    to_date: date
    total_days: int
    resarcitorio_total: float
    punitorio_total: float
    total_interest: float
    total_payable: float
    periods: List[AccrualPeriodSchema]


class ProposalOption(Schema):
    installments: int = Field(..., gt=0, le=120)
    monthly_rate: float = Field(..., ge=0, description="Direct monthly rate, %")


class RefinancingRequest(Schema):
    """Request body for POST /v1/calculators/refinancing"""

    debt_amount: float = Field(..., gt=0)
    currency: Literal["USD", "ARS"] = "USD"
    exchange_rate: Optional[float] = Field(None, gt=0, description="ARS per USD; fetched live when omitted")
    first_due_date: date
    fixed_anchor: bool = False
    proposals: List[ProposalOption] = Field(..., min_length=1)


class PlanInstallmentSchema(Schema):
    number: int
    due_date: date
    principal: float
    interest: float
    amount: float
    remaining_balance: float


class RefinancingProposalSchema(Schema):
    installments: int
    monthly_rate: float
    plan: List[PlanInstallmentSchema]
    debt_in_pesos: float
    interest_total: float
    total_payable: float
    installment_amount: float
    coefficient: float


class RefinancingResponse(Schema):
    """Response for POST /v1/calculators/refinancing"""

    debt_in_pesos: float
    exchange_rate: Optional[float] = None
    proposals: List[RefinancingProposalSchema]


class InflationRequest(Schema):
    """Request body for POST /v1/calculators/inflation"""

    amount: float = Field(1.0, gt=0)
    from_year: int
    from_month: int = Field(..., ge=1, le=12)
    to_year: int
    to_month: int = Field(..., ge=1, le=12)


class InflationMonthSchema(Schema):
    year: int
    month: int
    inflation: float
    accumulated: float


class InflationResponse(Schema):
    """Response for POST /v1/calculators/inflation"""

    original_amount: float
    adjusted_amount: float
    total_percent: float
    avg_monthly_percent: float
    annualized_percent: float
    months_counted: int
    per_month: List[InflationMonthSchema]


class ExchangeRateSchema(Schema):
    """Response for GET /v1/fx/oficial"""

    buy: float
    sell: float
    updated_at: Optional[str] = None
