from uniswap_pair.core.errors import (
    ErrorCategory,
    ErrorCode,
    PairContextInvariantError,
    ProviderError,
    UniswapError,
    token_not_found,
)


def test_every_code_has_a_category():
    for code in ErrorCode:
        assert isinstance(UniswapError("x", code).category, ErrorCategory)


def test_to_dict_is_machine_readable():
    error = UniswapError("`ethereum_address` is not a valid address", ErrorCode.ETHEREUM_ADDRESS_NOT_VALID)

    assert error.to_dict() == {
        "code": "ETHEREUM_ADDRESS_NOT_VALID",
        "category": "input",
        "message": "`ethereum_address` is not a valid address",
    }
    assert str(error).startswith("ETHEREUM_ADDRESS_NOT_VALID: ")


def test_domain_errors():
    error = token_not_found("0x6B175474E89094C44Da98b954EedeAC495271d0F")
    assert error.code == ErrorCode.TOKEN_NOT_FOUND
    assert error.category == ErrorCategory.DOMAIN


def test_provider_error_context():
    base = ProviderError("timeout", provider="json_rpc", method="eth_call")
    wrapped = base.with_context("0x6B175474E89094C44Da98b954EedeAC495271d0F", "decimals")

    assert wrapped.category == ErrorCategory.CONNECTIVITY
    assert wrapped.to_dict()["step"] == "decimals"
    assert wrapped.to_dict()["address"] == "0x6B175474E89094C44Da98b954EedeAC495271d0F"
    assert "decimals failed" in wrapped.message


def test_invariant_error_defaults():
    error = PairContextInvariantError("bookkeeping broken")
    assert error.code == ErrorCode.INTERNAL_INVARIANT
    assert isinstance(error, UniswapError)
