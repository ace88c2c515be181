from enum import IntEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

# Attribute names follow the SMS Backup & Restore XML format.
# https://www.synctech.com.au/sms-backup-restore/fields-in-xml-backup-files/


class SMSType(IntEnum):
    INVALID = 0
    RECEIVED = 1
    SENT = 2
    DRAFT = 3
    OUTBOX = 4
    FAILED = 5
    QUEUED = 6


class XMLModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    xml_tag: ClassVar[str] = ""


class SMS(XMLModel):
    xml_tag = "sms"

    protocol: int | None = None
    address: str
    date: str
    type: SMSType
    subject: str | None = None
    body: str
    toa: str | None = None
    sc_toa: str | None = None
    service_center: str | None = None
    read: int
    status: int
    locked: int | None = None
    date_sent: int | None = None
    readable_date: str | None = None
    contact_name: int | None = None


class MMSPart(XMLModel):
    xml_tag = "part"

    seq: int
    ct: str
    name: str
    chset: str
    cd: str
    fn: str
    cid: str
    cl: str
    ctt_s: str
    ctt_t: str
    text: str
    data: str | None = None


class MMS(XMLModel):
    xml_tag = "mms"

    parts: Annotated[list[MMSPart], Field(default_factory=list)]
    text_only: int | None = None
    sub: str | None = None
    retr_st: str
    date: int
    ct_cls: str
    sub_cs: str
    read: int
    ct_l: str
    tr_id: str
    st: str
    msg_box: int
    address: str
    m_cls: str
    d_tm: str
    read_status: str
    ct_t: str
    retr_txt_cs: str
    d_rpt: int
    m_id: str
    date_sent: int
    seen: int
    m_type: int
    v: int
    exp: str
    pri: int
    rr: int
    resp_txt: str
    rpt_a: str
    locked: int
    retr_txt: str
    resp_st: str
    m_size: str
    readable_date: str | None = None
    contact_name: str | None = None


class SMSes(XMLModel):
    """Root ``<smses>`` element holding every translated record."""

    xml_tag = "smses"

    count: int
    mms: Annotated[list[MMS], Field(default_factory=list)]
    sms: Annotated[list[SMS], Field(default_factory=list)]

    @classmethod
    def from_records(
        cls, sms: list[SMS] | None = None, mms: list[MMS] | None = None
    ) -> "SMSes":
        sms = list(sms or [])
        mms = list(mms or [])
        return cls(count=len(sms) + len(mms), mms=mms, sms=sms)
