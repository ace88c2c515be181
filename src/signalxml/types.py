from signalxml.errors import UnknownSMSTypeError
from signalxml.models.xml import SMSType

# Only the lowest 5 bits carry the message box; the rest are flags.
# https://github.com/signalapp/Signal-Android/blob/master/src/org/thoughtcrime/securesms/database/MmsSmsColumns.java
BASE_TYPE_MASK = 0x1F

_BASE_TYPES = {
    # standard
    1: SMSType.RECEIVED,
    2: SMSType.SENT,
    3: SMSType.DRAFT,
    4: SMSType.OUTBOX,
    5: SMSType.FAILED,
    6: SMSType.QUEUED,
    # signal
    20: SMSType.RECEIVED,
    21: SMSType.OUTBOX,
    22: SMSType.QUEUED,  # sending
    23: SMSType.SENT,
    24: SMSType.FAILED,
    25: SMSType.QUEUED,  # pending secure SMS fallback
    26: SMSType.QUEUED,  # pending insecure SMS fallback
    27: SMSType.DRAFT,
}


def translate_sms_type(raw: int) -> SMSType:
    try:
        return _BASE_TYPES[raw & BASE_TYPE_MASK]
    except KeyError:
        raise UnknownSMSTypeError(raw) from None
