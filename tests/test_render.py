"""Unit tests for XML rendering."""

from lxml import etree

from signalxml.models.xml import SMS, MMSPart, SMSes, SMSType
from signalxml.render import to_element, to_xml
from signalxml.translate import new_mms_from_statement, new_sms_from_statement


class TestToElement:
    def test_sms_attributes(self, make_sms_statement, utc):
        sms = new_sms_from_statement(
            make_sms_statement(
                address="+15551234567",
                type=2,
                body="hello",
                date_received=1700000000000,
                read=1,
                status=-1,
            ),
            tz=utc,
        )
        el = to_element(sms)

        assert el.tag == "sms"
        assert dict(el.attrib) == {
            "protocol": "0",
            "address": "+15551234567",
            "date": "1700000000000",
            "type": "2",
            "body": "hello",
            "read": "1",
            "status": "-1",
            "readable_date": "Nov 14, 2023 10:13:20 PM",
        }

    def test_optional_attributes_omitted(self):
        sms = SMS(address="", date="", type=SMSType.INVALID, body="", read=0, status=0)
        el = to_element(sms)

        assert "subject" not in el.attrib
        assert "contact_name" not in el.attrib
        assert el.get("type") == "0"

    def test_control_characters_are_replaced(self):
        sms = SMS(
            address="+1",
            date="",
            type=SMSType.RECEIVED,
            subject="a\x01b",
            body="hi\x0bthere\x00\ttab\nline",
            read=0,
            status=0,
        )
        root = etree.fromstring(to_xml(SMSes.from_records(sms=[sms])))

        assert root[0].get("body") == "hi\ufffdthere\ufffd\ttab\nline"
        assert root[0].get("subject") == "a\ufffdb"

    def test_mms_parts_are_wrapped(self, make_mms_statement):
        part = MMSPart(
            seq=0,
            ct="image/png",
            name="a.png",
            chset="null",
            cd="null",
            fn="null",
            cid="<a.png>",
            cl="a.png",
            ctt_s="null",
            ctt_t="null",
            text="null",
            data="iVBORw0KGgo=",
        )
        el = to_element(new_mms_from_statement(make_mms_statement(), [part]))

        assert el.tag == "mms"
        assert "parts" not in el.attrib
        assert el.get("text_only") == "0"
        assert el.get("ct_cls") == "null"
        (parts,) = el
        assert parts.tag == "parts"
        assert parts[0].tag == "part"
        assert parts[0].get("cid") == "<a.png>"
        assert parts[0].get("data") == "iVBORw0KGgo="


class TestToXML:
    def test_document(self, make_sms_statement, make_mms_statement):
        smses = SMSes.from_records(
            sms=[new_sms_from_statement(make_sms_statement(body="one", type=1))],
            mms=[new_mms_from_statement(make_mms_statement())],
        )
        doc = to_xml(smses)

        assert doc.startswith(b"<?xml version='1.0' encoding='UTF-8' standalone='yes'?>")
        root = etree.fromstring(doc)
        assert root.tag == "smses"
        assert root.get("count") == "2"
        assert [child.tag for child in root] == ["mms", "sms"]
        assert root[1].get("body") == "one"

    def test_empty_backup(self):
        root = etree.fromstring(to_xml(SMSes.from_records()))

        assert root.get("count") == "0"
        assert len(root) == 0
