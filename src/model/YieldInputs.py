"""Flat settings record for the tax-equivalent yield calculation."""

from dataclasses import dataclass
from typing import Any, Callable, Optional


def _to_flag(value: Any) -> bool:
    # only real booleans; bool("false") is True
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    return value


def _to_index(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("expected an integer, got bool")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value}")
    return int(value)


@dataclass
class YieldInputs:
    """Yields and tax settings entered by the user.

    All yields and brackets are percentages (4.5 means 4.5%). Nothing is
    validated: NaN or out-of-range values are carried through the
    calculation as-is.
    """
    # Yields
    fully_taxable: float = 0.0
    treasury: float = 0.0
    natl_tax_exempt: float = 0.0
    natl_amt_pct: float = 0.0  # AMT-includable portion of national tax-exempt income
    state_tax_exempt: float = 0.0
    state_amt_pct: float = 0.0  # AMT-includable portion of state tax-exempt income
    amt_free: float = 0.0  # already an after-tax yield

    # Tax settings
    fed_bracket: float = 0.0
    state_bracket: float = 0.0
    itemize: bool = False
    amt: bool = False
    amt_bracket_index: int = 0  # ignored unless amt is set

    @classmethod
    def from_spec(cls, spec: Optional[dict]) -> 'YieldInputs':
        """Build a YieldInputs from a camelCase spec dictionary.

        Missing keys (or keys set to None) fall back to the field defaults.

        Raises:
            ValueError: If a value cannot be converted to the field's type. Flags
                must be real booleans and the AMT bracket index a whole number.
        """
        spec = spec or {}

        def read(key: str, convert: Callable[[Any], Any], default: Any) -> Any:
            value = spec.get(key)
            if value is None:
                return default
            try:
                return convert(value)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid value for '{key}': {value!r}")

        return cls(
            fully_taxable=read('fullyTaxable', float, 0.0),
            treasury=read('treasury', float, 0.0),
            natl_tax_exempt=read('natlTaxExempt', float, 0.0),
            natl_amt_pct=read('natlAmtPct', float, 0.0),
            state_tax_exempt=read('stateTaxExempt', float, 0.0),
            state_amt_pct=read('stateAmtPct', float, 0.0),
            amt_free=read('amtFree', float, 0.0),
            fed_bracket=read('fedBracket', float, 0.0),
            state_bracket=read('stateBracket', float, 0.0),
            itemize=read('itemize', _to_flag, False),
            amt=read('amt', _to_flag, False),
            amt_bracket_index=read('amtBracketIndex', _to_index, 0),
        )
