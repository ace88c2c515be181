"""Positional SQL statements and the column layouts of Signal's message tables.

A backup frame carries each row as an ``INSERT`` statement plus an ordered list
of parameters. The models below give those parameters names, in table column
order, so the translator never indexes into the raw list itself.
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from pydantic import BaseModel, Field, ValidationError

from signalxml.errors import ColumnValueError

ColumnValue = str | int | float | bytes | None


class Statement(Protocol):
    def get_parameters(self) -> Sequence[ColumnValue]: ...


class SqlStatement(BaseModel):
    statement: str = ""
    parameters: list[ColumnValue] = Field(default_factory=list)

    def get_parameters(self) -> Sequence[ColumnValue]:
        return self.parameters


class SQLSMS(BaseModel):
    """Row of the ``sms`` table."""

    id: int = 0
    thread_id: int | None = None
    address: str | None = None
    address_device_id: int = 0
    person: int | None = None
    date_received: int | None = None
    date_sent: int | None = None
    protocol: int = 0
    read: int = 0
    status: int = 0
    type: int | None = None
    reply_path_present: int | None = None
    delivery_receipt_count: int = 0
    subject: str | None = None
    body: str | None = None
    mismatched_identities: str | None = None
    service_center: str | None = None
    subscription_id: int = 0
    expires_in: int = 0
    expire_started: int = 0
    notified: int = 0
    read_receipt_count: int = 0


class SQLMMS(BaseModel):
    """Row of the ``mms`` table."""

    id: int = 0
    thread_id: int | None = None
    date_sent: int | None = None
    date_received: int | None = None
    msg_box: int | None = None
    read: int = 0
    m_id: str | None = None
    sub: str | None = None
    sub_cs: int | None = None
    body: str | None = None
    part_count: int | None = None
    ct_t: str | None = None
    ct_l: str | None = None
    address: str | None = None
    address_device_id: int | None = None
    exp: int | None = None
    m_cls: str | None = None
    m_type: int | None = None
    v: int | None = None
    m_size: int | None = None
    pri: int | None = None
    rr: int | None = None
    rpt_a: int | None = None
    resp_st: int | None = None
    st: int | None = None
    tr_id: str | None = None
    retr_st: int | None = None
    retr_txt: str | None = None
    retr_txt_cs: int | None = None
    read_status: int | None = None
    ct_cls: int | None = None
    resp_txt: str | None = None
    d_tm: int | None = None
    delivery_receipt_count: int = 0
    mismatched_identities: str | None = None
    network_failures: str | None = None
    d_rpt: int | None = None
    subscription_id: int = 0
    expires_in: int = 0
    expire_started: int = 0
    notified: int = 0
    read_receipt_count: int = 0


SMS_COLUMNS = len(SQLSMS.model_fields)
MMS_COLUMNS = len(SQLMMS.model_fields)

T = TypeVar("T", bound=BaseModel)


def _from_parameters(model: type[T], kind: str, stmt: Statement) -> T | None:
    params = stmt.get_parameters()
    if len(params) != len(model.model_fields):
        return None
    # NULL columns fall back to the field default.
    data = {
        name: value
        for name, value in zip(model.model_fields, params)
        if value is not None
    }
    try:
        return model(**data)
    except ValidationError as e:
        raise ColumnValueError(
            kind, e.errors(include_url=False, include_input=False)
        ) from e


def statement_to_sms(stmt: Statement) -> SQLSMS | None:
    return _from_parameters(SQLSMS, "SMS", stmt)


def statement_to_mms(stmt: Statement) -> SQLMMS | None:
    return _from_parameters(SQLMMS, "MMS", stmt)
