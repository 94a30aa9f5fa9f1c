"""SQLAlchemy ORM models for the imported operations sheet"""

import uuid
from sqlalchemy import Column, String, Float, Date, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class OperationRecord(Base):
    """One imported operations row (sale, trade-in and/or payment)"""

    __tablename__ = "operations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Index of the row in the imported set; payments fold in this order
    position = Column(Integer, nullable=False, index=True)
    boleto = Column(String(64), nullable=False, index=True)
    fecha = Column(Date, nullable=True)
    cod_cliente = Column(String(64), nullable=False, default="", index=True)
    nombre_cliente = Column(Text, nullable=False, default="")
    vendedor = Column(Text, nullable=False, default="")
    producto = Column(Text, nullable=False, default="")
    cantidad = Column(Float, nullable=False, default=0)
    precio_unitario = Column(Float, nullable=False, default=0)
    total_operacion = Column(Float, nullable=False, default=0)
    usado = Column(Text, nullable=False, default="")
    valor_usado = Column(Float, nullable=False, default=0)
    chasis_motor = Column(Text, nullable=False, default="")
    forma_pago = Column(Text, nullable=False, default="")
    fecha_pago = Column(Date, nullable=True)
    recibo = Column(Text, nullable=False, default="")
    cuota = Column(Text, nullable=False, default="")
    cheque_transf = Column(Text, nullable=False, default="")
    vto_cheque = Column(Date, nullable=True)
    tipo_cambio = Column(Float, nullable=False, default=0)
    importe_ars = Column(Float, nullable=False, default=0)
    importe_usd = Column(Float, nullable=False, default=0)
    cta_cte = Column(Float, nullable=False, default=0)
    saldo_final = Column(Float, nullable=True)
    observacion = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
