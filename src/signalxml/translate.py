import logging
from collections.abc import Iterable, Sequence
from datetime import tzinfo
from typing import Literal

from signalxml.dates import int_to_time
from signalxml.errors import ColumnCountError, TranslationError
from signalxml.models.result import TranslationResult
from signalxml.models.statement import (
    MMS_COLUMNS,
    SMS_COLUMNS,
    Statement,
    statement_to_mms,
    statement_to_sms,
)
from signalxml.models.xml import MMS, SMS, MMSPart, SMSes, SMSType
from signalxml.types import translate_sms_type

logger = logging.getLogger("signalxml")

RecordKind = Literal["sms", "mms"]

# Attribute text the import tool uses for an empty value.
NULL = "null"


def _signed(n: int) -> int:
    # Signal stores signed columns as uint64 in the backup protobuf.
    return n - (1 << 64) if n >= (1 << 63) else n


def _text(v: str | int | None) -> str:
    return NULL if v is None else str(v)


def new_sms_from_statement(stmt: Statement, tz: tzinfo | None = None) -> SMS:
    sms = statement_to_sms(stmt)
    if sms is None:
        raise ColumnCountError("SMS", SMS_COLUMNS, len(stmt.get_parameters()))

    return SMS(
        protocol=sms.protocol,
        address=sms.address or "",
        date="" if sms.date_received is None else str(sms.date_received),
        type=SMSType.INVALID if sms.type is None else translate_sms_type(sms.type),
        subject=sms.subject,
        body=sms.body or "",
        service_center=sms.service_center,
        read=sms.read,
        status=_signed(sms.status),
        date_sent=sms.date_sent,
        readable_date=int_to_time(sms.date_received, tz),
        contact_name=sms.person,
    )


def new_mms_from_statement(
    stmt: Statement, parts: Sequence[MMSPart] = (), tz: tzinfo | None = None
) -> MMS:
    """Build an ``<mms>`` record from an ``mms`` table row.

    Parts live in their own table, so the caller passes them in. ``text_only``
    is only set when parts are given.
    """
    mms = statement_to_mms(stmt)
    if mms is None:
        raise ColumnCountError("MMS", MMS_COLUMNS, len(stmt.get_parameters()))

    text_only = None
    if parts:
        text_only = int(all(p.ct == "text/plain" for p in parts))

    msg_box = SMSType.INVALID
    if mms.msg_box is not None:
        msg_box = translate_sms_type(mms.msg_box)

    return MMS(
        parts=list(parts),
        text_only=text_only,
        sub=mms.sub,
        retr_st=_text(mms.retr_st),
        date=mms.date_received or 0,
        ct_cls=_text(mms.ct_cls),
        sub_cs=_text(mms.sub_cs),
        read=mms.read,
        ct_l=_text(mms.ct_l),
        tr_id=_text(mms.tr_id),
        st=_text(mms.st),
        msg_box=int(msg_box),
        address=_text(mms.address),
        m_cls=_text(mms.m_cls),
        d_tm=_text(mms.d_tm),
        read_status=_text(mms.read_status),
        ct_t=_text(mms.ct_t),
        retr_txt_cs=_text(mms.retr_txt_cs),
        d_rpt=mms.d_rpt or 0,
        m_id=_text(mms.m_id),
        date_sent=mms.date_sent or 0,
        seen=mms.read,
        m_type=mms.m_type or 0,
        v=mms.v or 0,
        exp=_text(mms.exp),
        pri=mms.pri or 0,
        rr=mms.rr or 0,
        resp_txt=_text(mms.resp_txt),
        rpt_a=_text(mms.rpt_a),
        locked=0,
        retr_txt=_text(mms.retr_txt),
        resp_st=_text(mms.resp_st),
        m_size=_text(mms.m_size),
        readable_date=int_to_time(mms.date_received, tz),
    )


def translate_statement(
    stmt: Statement, kind: RecordKind, tz: tzinfo | None = None
) -> TranslationResult:
    try:
        if kind == "sms":
            record: SMS | MMS = new_sms_from_statement(stmt, tz)
        elif kind == "mms":
            record = new_mms_from_statement(stmt, tz=tz)
        else:
            logger.error(f"Unknown record kind: {kind!r}")
            return TranslationResult(
                status="error", message=f"unknown record kind: {kind!r}"
            )
    except TranslationError as e:
        logger.error(f"Translation error: {e}")
        return TranslationResult(status="error", message=str(e))
    return TranslationResult(
        status="success", message=f"{kind.upper()} translated", record=record
    )


def build_backup(
    sms_statements: Iterable[Statement],
    mms_statements: Iterable[Statement] = (),
    skip_errors: bool = False,
    tz: tzinfo | None = None,
) -> SMSes:
    """Translate every statement into one ``<smses>`` document, in order.

    Translation errors propagate unless ``skip_errors`` is set, in which case
    the offending record is logged and left out.
    """
    sms: list[SMS] = []
    mms: list[MMS] = []

    for i, stmt in enumerate(sms_statements):
        try:
            sms.append(new_sms_from_statement(stmt, tz))
        except TranslationError as e:
            if not skip_errors:
                raise
            logger.error(f"Skipping SMS #{i}: {e}")

    for i, stmt in enumerate(mms_statements):
        try:
            mms.append(new_mms_from_statement(stmt, tz=tz))
        except TranslationError as e:
            if not skip_errors:
                raise
            logger.error(f"Skipping MMS #{i}: {e}")

    logger.debug(f"Translated {len(sms)} SMS and {len(mms)} MMS records")
    return SMSes.from_records(sms=sms, mms=mms)
