from typing import Dict, Optional


# AMT federal rate (percent) keyed by the bracket selector shown to the user.
# Selectors 0 and 1 both map to the lowest AMT tier.
AMT_BRACKET_RATES: Dict[int, float] = {
    0: 26.0,
    1: 26.0,
    2: 32.5,
    3: 35.0,
    4: 28.0,
}

DEFAULT_AMT_RATE = 26.0


class AMTDetails:
    """Holds the Alternative Minimum Tax bracket table.

    When AMT applies, the ordinary federal bracket is replaced by the rate
    looked up here and itemized deductions are disallowed.
    """

    def __init__(self, bracket_rates: Optional[Dict[int, float]] = None, default_rate: float = DEFAULT_AMT_RATE):
        """Create an AMTDetails instance.

        Args:
            bracket_rates: Mapping of bracket selector to AMT rate in percent.
                Defaults to AMT_BRACKET_RATES.
            default_rate: Rate used for any selector missing from the table.
        """
        self.bracket_rates = dict(AMT_BRACKET_RATES if bracket_rates is None else bracket_rates)
        self.default_rate = default_rate

    def rate(self, bracket_index: int) -> float:
        """Return the AMT federal rate (percent) for the given bracket selector."""
        return self.bracket_rates.get(bracket_index, self.default_rate)
