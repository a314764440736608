import ipaddress
import pytest

from fields import FieldConfig, ValidatedTextField, DnsField, MtuField, MTU_FOOTER


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)


# -- ValidatedTextField ----------------------------------------------------

def test_field_starts_unfocused():
    field = ValidatedTextField(FieldConfig(allowed_chars="abc"))
    assert not field.focused
    assert field.text == ""

def test_submit_fires_once_on_focus_loss():
    rec = Recorder()
    field = ValidatedTextField(FieldConfig(allowed_chars="abc", on_submit_text=rec))
    field.set_focus(True)
    assert rec.calls == []
    field.text = "abc"
    field.set_focus(False)
    assert rec.calls == ["abc"]
    field.set_focus(False)
    assert rec.calls == ["abc"]

def test_gaining_focus_twice_does_nothing():
    rec = Recorder()
    field = ValidatedTextField(FieldConfig(allowed_chars="a", on_submit_text=rec))
    field.set_focus(True)
    field.set_focus(True)
    assert rec.calls == []

def test_last_submit_handler_wins():
    first, second = Recorder(), Recorder()
    field = ValidatedTextField(FieldConfig(allowed_chars="a", on_submit_text=first))
    field.config.on_submit_text = second
    field.set_focus(True)
    field.set_focus(False)
    assert first.calls == []
    assert second.calls == [""]

def test_validity_defaults_to_true():
    field = ValidatedTextField(FieldConfig(allowed_chars="a"), text="anything")
    assert field.is_valid

def test_invalid_text_is_kept():
    field = ValidatedTextField(FieldConfig(allowed_chars="ab", is_valid_input=lambda t: t == "ab"))
    field.type_text("a")
    assert field.text == "a"
    assert not field.is_valid
    field.type_text("b")
    assert field.is_valid

def test_type_text_drops_disallowed_chars():
    field = ValidatedTextField(FieldConfig(allowed_chars="0123456789"))
    field.type_text("1x2 3")
    assert field.text == "123"
    assert field.filter("4-2") == "42"

def test_restrict_pattern_escapes_allowlist():
    assert FieldConfig(allowed_chars="a.:").restrict == r"[a\.:]*"


# -- DnsField ----------------------------------------------------------------

def _submit(field, text):
    field.set_focus(True)
    field.text = text
    field.set_focus(False)

def test_dns_valid_ipv4_submitted():
    rec = Recorder()
    _submit(DnsField(rec), "1.2.3.4")
    assert rec.calls == [ipaddress.ip_address("1.2.3.4")]

def test_dns_valid_ipv6_submitted_canonical():
    rec = Recorder()
    _submit(DnsField(rec), "2001:DB8:0::1")
    assert rec.calls == [ipaddress.ip_address("2001:db8::1")]

def test_dns_empty_submits_none():
    rec = Recorder()
    _submit(DnsField(rec), "")
    assert rec.calls == [None]

@pytest.mark.parametrize("text", ["1.2.3", "1.2.3.4.", "::g", "abc"])
def test_dns_invalid_submits_nothing(text):
    rec = Recorder()
    field = DnsField(rec)
    _submit(field, text)
    assert rec.calls == []
    assert field.text == text

def test_dns_allowlist():
    field = DnsField()
    field.type_text("1.2.3.4 x:AbCdEf-g")
    assert field.text == "1.2.3.4:AbCdEf"

def test_dns_validity():
    field = DnsField(text="1.2.3")
    assert not field.is_valid
    field.text = "1.2.3.4"
    assert field.is_valid

def test_dns_without_listener_is_silent():
    _submit(DnsField(), "1.2.3.4")

def test_dns_address_property():
    field = DnsField()
    assert field.address is None
    field.address = ipaddress.ip_address("::1")
    assert field.text == "::1"
    assert field.address == ipaddress.ip_address("::1")


# -- MtuField ----------------------------------------------------------------

def test_mtu_valid_submitted():
    rec = Recorder()
    _submit(MtuField(rec), "1400")
    assert rec.calls == [1400]

@pytest.mark.parametrize("text", ["1280", "1420"])
def test_mtu_bounds_inclusive(text):
    rec = Recorder()
    _submit(MtuField(rec), text)
    assert rec.calls == [int(text)]

def test_mtu_empty_submits_none():
    rec = Recorder()
    _submit(MtuField(rec), "")
    assert rec.calls == [None]

@pytest.mark.parametrize("text", ["9999", "1279", "1421", "0"])
def test_mtu_out_of_range_submits_nothing(text):
    rec = Recorder()
    _submit(MtuField(rec), text)
    assert rec.calls == []

def test_mtu_allowlist_digits_only():
    field = MtuField()
    field.type_text("1a4.0-0")
    assert field.text == "1400"

def test_mtu_value_property():
    field = MtuField()
    field.value = 1300
    assert field.text == "1300"
    field.value = None
    assert field.text == ""
    assert field.value is None

def test_mtu_footer_mentions_bounds():
    field = MtuField()
    assert field.footer == MTU_FOOTER
    assert str(MtuField.MIN_MTU) in field.footer
    assert str(MtuField.MAX_MTU) in field.footer


# -- Check helper and rejected submissions --------------------------------------

def test_check_uses_predicate_or_defaults_to_valid():
    assert ValidatedTextField(FieldConfig(allowed_chars="a")).check("zzz")
    field = ValidatedTextField(FieldConfig(allowed_chars="a", is_valid_input=lambda t: t == "a"))
    assert field.check("a")
    assert not field.check("aa")

def test_dns_rejected_text_gets_message():
    submitted, rejected = Recorder(), Recorder()
    field = DnsField(submitted)
    field.on_rejected_text = rejected
    _submit(field, "1.2.3")
    assert submitted.calls == []
    assert len(rejected.calls) == 1
    assert "1.2.3" in rejected.calls[0]

def test_mtu_rejected_text_gets_message():
    submitted, rejected = Recorder(), Recorder()
    field = MtuField(submitted)
    field.on_rejected_text = rejected
    _submit(field, "9999")
    assert submitted.calls == []
    assert len(rejected.calls) == 1
    assert "1280-1420" in rejected.calls[0]

@pytest.mark.parametrize("field_cls", [DnsField, MtuField])
def test_empty_submission_is_not_rejected(field_cls):
    rejected = Recorder()
    field = field_cls(Recorder())
    field.on_rejected_text = rejected
    _submit(field, "")
    assert rejected.calls == []
