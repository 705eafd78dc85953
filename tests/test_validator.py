from product_catalog.core.constants import StoreError
from product_catalog.core.models import Product
from product_catalog.engine.validator import missing_required_fields, validate_new_product

def _candidate(**overrides):
    data = {"title":"A","description":"d","price":9.99,"thumbnail":"t.jpg","code":"C1","stock":10}
    data.update(overrides)
    return data

def test_validator_accepts_complete_candidate():
    error, msgs = validate_new_product(_candidate(), [])
    assert error is None
    assert msgs == []

def test_validator_rejects_missing_and_empty_fields():
    cand = _candidate(title="")
    del cand["thumbnail"]
    error, msgs = validate_new_product(cand, [])
    assert error == StoreError.VALIDATION
    assert "title" in msgs[0] and "thumbnail" in msgs[0]

def test_stock_zero_is_valid_but_none_is_not():
    assert missing_required_fields(_candidate(stock=0)) == []
    assert missing_required_fields(_candidate(stock=None)) == ["stock"]

def test_zero_price_rejected_unless_disabled():
    assert missing_required_fields(_candidate(price=0)) == ["price"]
    assert missing_required_fields(_candidate(price=0), reject_zero_price=False) == []
    assert missing_required_fields(_candidate(price=None), reject_zero_price=False) == ["price"]

def test_validator_rejects_duplicate_code_case_sensitive():
    existing = [Product(id=1, **_candidate())]
    error, msgs = validate_new_product(_candidate(title="B"), existing)
    assert error == StoreError.DUPLICATE_CODE
    assert "C1" in msgs[0]
    error, _ = validate_new_product(_candidate(code="c1"), existing)
    assert error is None
