from dataclasses import dataclass


@dataclass
class YieldResult:
    fully_taxable_after_tax: float
    fully_taxable_tey: float
    treasury_after_tax: float
    treasury_tey: float
    natl_after_tax: float
    natl_tey: float
    state_after_tax: float
    state_tey: float
    amt_free_after_tax: float
    amt_free_tey: float

    # Settings actually applied (AMT may override the federal bracket and itemization)
    federal_rate: float = 0.0
    state_rate: float = 0.0
    itemize: bool = False
    amt: bool = False
    grossup: float = 0.0

    text: str = ""
