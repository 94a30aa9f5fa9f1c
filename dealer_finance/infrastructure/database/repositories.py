"""Data access layer for imported operation rows"""

from typing import List
from sqlalchemy.orm import Session
from dealer_finance.infrastructure.database.models import OperationRecord
from dealer_finance.domain.models import RawTransactionRow
from dealer_finance.config import settings


def record_to_row(record: OperationRecord) -> RawTransactionRow:
    """Convert stored record to domain row"""
    return RawTransactionRow(
        ticket_id=record.boleto,
        operation_date=record.fecha,
        client_code=record.cod_cliente or "",
        client_name=record.nombre_cliente or "",
        salesperson=record.vendedor or "",
        product=record.producto or "",
        quantity=record.cantidad or 0,
        unit_price=record.precio_unitario or 0,
        line_total=record.total_operacion or 0,
        used_item=record.usado or "",
        used_item_value=record.valor_usado or 0,
        chassis_engine=record.chasis_motor or "",
        payment_method=record.forma_pago or "",
        payment_date=record.fecha_pago,
        receipt=record.recibo or "",
        installment=record.cuota or "",
        instrument=record.cheque_transf or "",
        check_due_date=record.vto_cheque,
        exchange_rate=record.tipo_cambio or 0,
        amount_ars=record.importe_ars or 0,
        amount_usd=record.importe_usd or 0,
        running_balance_hint=record.cta_cte or 0,
        final_balance_hint=record.saldo_final,
        note=record.observacion or "",
    )


def row_to_record(row: RawTransactionRow, position: int) -> OperationRecord:
    """Convert domain row to a record at the given position of the import"""
    return OperationRecord(
        position=position,
        boleto=row.ticket_id,
        fecha=row.operation_date,
        cod_cliente=row.client_code,
        nombre_cliente=row.client_name,
        vendedor=row.salesperson,
        producto=row.product,
        cantidad=row.quantity,
        precio_unitario=row.unit_price,
        total_operacion=row.line_total,
        usado=row.used_item,
        valor_usado=row.used_item_value,
        chasis_motor=row.chassis_engine,
        forma_pago=row.payment_method,
        fecha_pago=row.payment_date,
        recibo=row.receipt,
        cuota=row.installment,
        cheque_transf=row.instrument,
        vto_cheque=row.check_due_date,
        tipo_cambio=row.exchange_rate,
        importe_ars=row.amount_ars,
        importe_usd=row.amount_usd,
        cta_cte=row.running_balance_hint,
        saldo_final=row.final_balance_hint,
        observacion=row.note,
    )


class OperationRepository:
    """Repository for the operations row set"""

    def __init__(self, db: Session, batch_size: int | None = None):
        self.db = db
        self.batch_size = batch_size or settings.insert_batch_size

    def replace_all(self, rows: List[RawTransactionRow]) -> int:
        """
        Replace the stored row set with a new import.

        Rows are inserted in batches, keeping their import position so the
        original order can be restored on read. Caller commits.
        """
        self.db.query(OperationRecord).delete()

        records = [row_to_record(row, position) for position, row in enumerate(rows)]
        for start in range(0, len(records), self.batch_size):
            self.db.add_all(records[start:start + self.batch_size])
            self.db.flush()

        return len(records)

    def list_rows(self) -> List[RawTransactionRow]:
        """All rows in import order"""
        records = (
            self.db.query(OperationRecord)
            .order_by(OperationRecord.position.asc())
            .all()
        )
        return [record_to_row(r) for r in records]

    def count(self) -> int:
        return self.db.query(OperationRecord).count()
