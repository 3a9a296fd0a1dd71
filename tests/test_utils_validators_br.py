from __future__ import annotations
import random
import pytest

from docvalidator import DocumentValidator, FormatError, InvalidKind
from docvalidator.utils.validators_br import (
    compute_check_digits, detect_kind, is_valid_cnpj, is_valid_cpf, is_valid_document,
    isValidCNPJ, isValidCPF, parse_document, validate, _weights,
)
from docvalidator.models import DocumentKind

VALID_CPF = ["541.560.490-19", "184.409.850-88", "767.461.270-87", "529.982.247-25"]
INVALID_CPF = ["890.278.300-62", "089.884.870-31", "645.742.030-32", "111.111.111-11", "000.000.000-0"]
VALID_CNPJ = ["32.609.453/0001-06", "90.880.788/0001-60", "56.878.092/0001-61", "04.252.011/0001-10"]
INVALID_CNPJ = ["47.102.248/0011-27", "74.495.872/0001-02", "91.840.023/0001-63",
                "00.000.000/0000-00", "11.111.111/1111-11", "00.000.000/0000-0"]

def test_cpf_known_vectors():
    for cpf in VALID_CPF:
        assert is_valid_cpf(cpf) is True, cpf
        assert is_valid_cpf(cpf.replace(".", "").replace("-", "")) is True, cpf
    for cpf in INVALID_CPF:
        assert is_valid_cpf(cpf) is False, cpf

def test_cnpj_known_vectors():
    for cnpj in VALID_CNPJ:
        assert is_valid_cnpj(cnpj) is True, cnpj
        assert is_valid_cnpj(cnpj.replace(".", "").replace("/", "").replace("-", "")) is True, cnpj
    for cnpj in INVALID_CNPJ:
        assert is_valid_cnpj(cnpj) is False, cnpj

def test_camel_case_aliases():
    assert isValidCPF("541.560.490-19") is True
    assert isValidCNPJ("32.609.453/0001-06") is True
    v = DocumentValidator()
    assert v.isValidCPF("184.409.850-88") is True
    assert v.isValidCNPJ("47.102.248/0011-27") is False

def test_repeated_digits_always_invalid():
    for d in "0123456789":
        assert is_valid_cpf(d * 11) is False
        assert is_valid_cpf(f"{d*3}.{d*3}.{d*3}-{d*2}") is False
        assert is_valid_cnpj(d * 14) is False
        assert is_valid_cnpj(f"{d*2}.{d*3}.{d*3}/{d*4}-{d*2}") is False

def test_wrong_length_is_false():
    for s in ["", "5415604901", "541560490190", "5415604901"[:5]]:
        assert is_valid_cpf(s) is False
    assert is_valid_cnpj("3260945300010") is False
    assert is_valid_cnpj("326094530001066") is False
    # CPF válido não é CNPJ e vice-versa
    assert is_valid_cnpj("541.560.490-19") is False
    assert is_valid_cpf("32.609.453/0001-06") is False

def test_malformed_input_is_false_not_exception():
    for s in ["541.560.490/19", "541560490-19", "541.560.49019", "54l.560.490-19",
              "541 560 490 19", "５４１５６０４９０１９", None, 54156049019, ["541.560.490-19"]]:
        assert is_valid_cpf(s) is False
    assert is_valid_cnpj("32.609.453.0001-06") is False
    assert is_valid_cnpj("32609453/0001-06") is False

def test_surrounding_whitespace_is_ignored():
    assert is_valid_cpf("  541.560.490-19\n") is True
    assert is_valid_cnpj(" 32609453000106 ") is True

def test_validate_dispatch_and_default_kind():
    assert validate("541.560.490-19") is True
    assert validate("541.560.490-19", "cpf") is True
    assert validate("32.609.453/0001-06", "CNPJ") is True
    assert validate("32.609.453/0001-06", DocumentKind.CNPJ) is True
    assert validate("32.609.453/0001-06") is False  # padrão é CPF
    assert validate("541.560.490-19", None) is True

def test_validate_unknown_kind_raises():
    with pytest.raises(InvalidKind):
        validate("541.560.490-19", "RG")
    with pytest.raises(ValueError):
        DocumentValidator().validate("541.560.490-19", "cnh")

def test_idempotent():
    for s in VALID_CPF + INVALID_CPF:
        assert is_valid_cpf(s) == is_valid_cpf(s)

def test_weights_tables():
    assert _weights(9, DocumentKind.CPF) == [10, 9, 8, 7, 6, 5, 4, 3, 2]
    assert _weights(10, DocumentKind.CPF) == [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]
    assert _weights(12, DocumentKind.CNPJ) == [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    assert _weights(13, DocumentKind.CNPJ) == [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

def test_compute_check_digits():
    assert compute_check_digits("541560490", "CPF") == "19"
    assert compute_check_digits("326094530001", DocumentKind.CNPJ) == "06"
    with pytest.raises(FormatError):
        compute_check_digits("12345", "CPF")
    with pytest.raises(FormatError):
        compute_check_digits("54156049a", "CPF")
    with pytest.raises(InvalidKind):
        compute_check_digits("541560490", "PIS")

def test_round_trip_random_bases():
    rnd = random.Random(20240601)
    for kind, is_valid in ((DocumentKind.CPF, is_valid_cpf), (DocumentKind.CNPJ, is_valid_cnpj)):
        for _ in range(200):
            base = "".join(rnd.choice("0123456789") for _ in range(kind.base_length))
            doc = base + compute_check_digits(base, kind)
            if len(set(doc)) == 1:
                continue
            assert is_valid(doc) is True, doc

def test_single_digit_change_breaks_checksum():
    cpf = "54156049019"
    for i in range(len(cpf)):
        d = str((int(cpf[i]) + 1) % 10)
        assert is_valid_cpf(cpf[:i] + d + cpf[i + 1:]) is False

def test_detect_kind_and_is_valid_document():
    assert detect_kind("541.560.490-19") is DocumentKind.CPF
    assert detect_kind("32609453000106") is DocumentKind.CNPJ
    assert detect_kind("123") is None
    assert detect_kind(None) is None
    assert is_valid_document("541.560.490-19") is True
    assert is_valid_document("32.609.453/0001-06") is True
    assert is_valid_document("47.102.248/0011-27") is False
    assert is_valid_document("123") is False

def test_parse_document():
    c = parse_document("32.609.453/0001-06")
    assert c.kind is DocumentKind.CNPJ
    assert c.digits == "32609453000106"
    assert c.base == "326094530001" and c.check == "06"
    bad = parse_document("541.560.490/19")
    assert bad.is_well_formed is False and bad.kind is None and bad.raw == "541.560.490/19"
    # tipo forçado que não bate com o tamanho
    assert parse_document("541.560.490-19", "CNPJ").digits is None
    with pytest.raises(InvalidKind):
        parse_document("541.560.490-19", "xyz")

def test_parse_document_empty_kind_detects():
    assert parse_document("541.560.490-19", "").kind is DocumentKind.CPF
    assert parse_document("32609453000106", "").kind is DocumentKind.CNPJ
    assert DocumentValidator().parse("541.560.490-19", None).digits == "54156049019"
