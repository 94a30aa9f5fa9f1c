"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session
from dealer_finance.api.main import create_app
from dealer_finance.infrastructure.database.models import Base
from dealer_finance.infrastructure.database.session import build_engine, get_db
from dealer_finance.domain.models import RawTransactionRow


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = build_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


def _sale(ticket_id, client_code, client_name, operation_date, product, total, **kwargs) -> RawTransactionRow:
    return RawTransactionRow(
        ticket_id=ticket_id,
        operation_date=operation_date,
        client_code=client_code,
        client_name=client_name,
        product=product,
        quantity=kwargs.pop("quantity", 1),
        unit_price=kwargs.pop("unit_price", total),
        line_total=total,
        **kwargs,
    )


def _payment(ticket_id, client_code, client_name, operation_date, paid_on, amount_usd, **kwargs) -> RawTransactionRow:
    return RawTransactionRow(
        ticket_id=ticket_id,
        operation_date=operation_date,
        client_code=client_code,
        client_name=client_name,
        payment_date=paid_on,
        amount_usd=amount_usd,
        **kwargs,
    )


@pytest.fixture
def sample_rows() -> list[RawTransactionRow]:
    """
    Operations sheet extract, in sheet order.

    Expected final balances:
    - 22283: 2925.74 (bank credit plus checks, proceso)
    - 22284: 169995.03 (first row has no payment date, pendiente)
    - 22285: -3900.00 (overpaid, proceso)
    - 22286: 125000.00 (trade-in, no payments)
    - 22298: -0.02 (settled)
    """
    sold = date(2025, 4, 30)
    transporte = ("10521", "TRANSPORTE PERSONAL S.A.")
    carcor = ("124046", "CAR-COR S.R.L.")
    rodriguez = ("10526", "TRANSPORTE GENERAL RODRIGUEZ S.A.")
    tandil = ("118", "EMPRESA TANDILENSE S A C I F I Y DE S.")
    lomas = ("123327", "EXPRESO LOMAS DE ZAMORA SA")

    rows = [
        _sale(
            "22283", *transporte, sold, "O 500 M 1826 Euro V Carroceria Saldivia", 300500,
            payment_method="Credito", payment_date=sold, receipt="181-662", instrument="Credito",
            check_due_date=sold, exchange_rate=1190, amount_ars=230000299.57, amount_usd=193277.56,
            note="Credito banco ICBC liquidado el dia 30/04/2025. El saldo con cheques",
        ),
        _payment("22283", *transporte, sold, date(2025, 9, 4), 25255.47, receipt="181-895", installment="1",
                 instrument="Echq", check_due_date=date(2025, 9, 5), exchange_rate=1370, amount_ars=34600000,
                 note="Se reconvirtio la operación"),
        _payment("22283", *transporte, sold, date(2025, 9, 4), 6303.93, receipt="181-898", installment="4",
                 instrument="Retenciones", check_due_date=date(2025, 9, 5), exchange_rate=1370,
                 amount_ars=8636387.06),
        _payment("22283", *transporte, sold, date(2025, 9, 4), 23862.07, receipt="181-895", installment="2",
                 instrument="Echq", check_due_date=date(2025, 10, 10), exchange_rate=1450, amount_ars=34600000),
        _payment("22283", *transporte, sold, date(2025, 9, 4), 23944.64, receipt="181-895", installment="3",
                 instrument="Echq", check_due_date=date(2025, 11, 7), exchange_rate=1445, amount_ars=34600000),
        _payment("22283", *transporte, sold, date(2025, 9, 4), 23521.06, receipt="181-895", installment="4",
                 instrument="Echq", check_due_date=date(2025, 12, 12), exchange_rate=1465,
                 amount_ars=34458352.94),
        _payment("22283", *transporte, sold, date(2025, 10, 24), 1409.53, receipt="181-960", installment="2",
                 instrument="Dif cuota", check_due_date=date(2025, 10, 24), exchange_rate=1450,
                 amount_ars=2043814.01, final_balance_hint=2925.74),
        _sale(
            "22284", *carcor, sold, "OF 1621 CA", 286444.83, quantity=2, unit_price=143222.41,
            receipt="181-517", instrument="chq", exchange_rate=1160, amount_ars=193879000, amount_usd=167137.07,
            note="Pago anticipado realizado por Martin Salgado",
        ),
        _payment("22284", *carcor, sold, date(2025, 7, 7), 101789.66, receipt="181-837", instrument="trf",
                 exchange_rate=1160, amount_ars=118076000),
        _payment("22284", *carcor, sold, date(2025, 9, 5), 14660.14, receipt="181-896", instrument="trf",
                 exchange_rate=1380, amount_ars=20231000),
        _payment("22284", *carcor, sold, None, 2857.96, receipt="Descuento",
                 note="Descuento aplicado por pago en efectivo"),
        _sale(
            "22285", *rodriguez, sold, "OF 1621 CM", 165100,
            payment_date=sold, receipt="181-664", instrument="chq", exchange_rate=1190, amount_ars=111860000,
            amount_usd=94000, note="Precio Chasis USD94.000 TC BNA lo paga de contado",
        ),
        _payment("22285", *rodriguez, sold, date(2025, 10, 3), 73645.78, receipt="181-929", instrument="chq",
                 exchange_rate=1380, amount_ars=101631176.83),
        _payment("22285", *rodriguez, sold, date(2025, 10, 7), 1354.22, receipt="181-935", instrument="Ret",
                 exchange_rate=1380, amount_ars=1868823.17),
        _sale(
            "22286", *tandil, sold, "OH 1721/62 Euro V", 396000, quantity=2, unit_price=198000,
            used_item="O500 U Año 2021 AE851SA / AF 016SC", used_item_value=271000, final_balance_hint=125000,
        ),
        _sale(
            "22298", *lomas, date(2025, 5, 13), "OH 1621 / 55 Euro V", 166000, used_item="N/A",
            payment_date=date(2025, 5, 13), receipt="181-768", instrument="trf", exchange_rate=1190,
            amount_ars=128520000, amount_usd=108000,
            note="Precio USD 166.000 TRF de USD 108.000 y el saldo con cheques",
        ),
    ]
    rows += [
        _payment("22298", *lomas, date(2025, 5, 13), date(2025, 6, 19), 9666.67, receipt="181-815",
                 instrument="chq", check_due_date=date(2025, 6 + i, 19), exchange_rate=1200, amount_ars=11600000)
        for i in range(6)
    ]
    return rows
