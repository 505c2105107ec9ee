import math
from typing import Optional, Tuple

from tax.AMTDetails import AMTDetails
from model.YieldInputs import YieldInputs
from model.YieldResult import YieldResult
from model.report import format_report


# Nominal yield used to derive the gross-up when the fully taxable yield can't be used
PROBE_YIELD = 1.0


class TaxEquivalentYieldCalculator:
    """Computes after-tax and tax-equivalent yields for each bond category.

    Pass a hydrated `AMTDetails` into the constructor (a default table is used
    otherwise). Every call recomputes from the inputs; nothing is cached and
    the inputs are never modified.
    """

    def __init__(self, amt_details: Optional[AMTDetails] = None):
        self.amt_details = amt_details if amt_details is not None else AMTDetails()

    def effective_rates(self, inputs: YieldInputs) -> Tuple[float, bool]:
        """Return the (federal rate, itemize) pair actually applied.

        Under AMT the federal bracket comes from the AMT table and itemized
        deductions are not allowed.
        """
        if inputs.amt:
            return self.amt_details.rate(inputs.amt_bracket_index), False
        return inputs.fed_bracket, inputs.itemize

    def after_tax_yield(self, yield_pct: float, fed_taxable: bool, state_taxable: bool,
                        amt_pct: float, inputs: YieldInputs) -> float:
        """Return the yield left after federal and state tax.

        Args:
            yield_pct: Pre-tax yield in percent.
            fed_taxable: True if the income is subject to ordinary federal tax.
            state_taxable: True if the income is subject to state tax.
            amt_pct: Percent of the income included in AMT when it is not
                federally taxable. Only used while AMT applies.
            inputs: The tax settings.

        No clamping is applied: a total tax above 100% gives a negative yield.
        """
        fed, itemize = self.effective_rates(inputs)
        state = inputs.state_bracket

        tax = 0.0
        if fed_taxable:
            tax += fed
        elif inputs.amt:
            tax += (amt_pct / 100.0) * fed

        if state_taxable:
            tax += state
            if itemize:
                # state tax paid is deducted on the federal return
                tax -= (state / 100.0) * fed

        return yield_pct * (1.0 - tax / 100.0)

    def grossup(self, inputs: YieldInputs, fully_after_tax: float) -> float:
        """Return the factor converting an after-tax yield into a tax-equivalent yield.

        Calibrated on the fully taxable category. When the fully taxable yield
        is NaN or its after-tax value is exactly zero, a probe yield of 1.0 is
        run through the same formula instead. A probe that is itself taxed away
        completely gives an infinite factor.
        """
        if math.isnan(inputs.fully_taxable) or fully_after_tax == 0:
            probe_after_tax = self.after_tax_yield(PROBE_YIELD, True, True, 0, inputs)
            if probe_after_tax == 0:
                return math.inf
            return PROBE_YIELD / probe_after_tax
        return inputs.fully_taxable / fully_after_tax

    def calculate(self, inputs: YieldInputs) -> YieldResult:
        fully_at = self.after_tax_yield(inputs.fully_taxable, True, True, 0, inputs)
        treasury_at = self.after_tax_yield(inputs.treasury, True, False, 0, inputs)
        natl_at = self.after_tax_yield(inputs.natl_tax_exempt, False, True, inputs.natl_amt_pct, inputs)
        state_at = self.after_tax_yield(inputs.state_tax_exempt, False, False, inputs.state_amt_pct, inputs)

        grossup = self.grossup(inputs, fully_at)
        fed, itemize = self.effective_rates(inputs)

        result = YieldResult(
            fully_taxable_after_tax=fully_at,
            fully_taxable_tey=inputs.fully_taxable,
            treasury_after_tax=treasury_at,
            treasury_tey=treasury_at * grossup,
            natl_after_tax=natl_at,
            natl_tey=natl_at * grossup,
            state_after_tax=state_at,
            state_tey=state_at * grossup,
            # AMT free yields are entered as after-tax already
            amt_free_after_tax=inputs.amt_free,
            amt_free_tey=inputs.amt_free * grossup,
            federal_rate=fed,
            state_rate=inputs.state_bracket,
            itemize=itemize,
            amt=inputs.amt,
            grossup=grossup,
        )
        result.text = format_report(result)
        return result


def calculate_yields(inputs: YieldInputs) -> YieldResult:
    """Convenience wrapper using the default AMT bracket table."""
    return TaxEquivalentYieldCalculator().calculate(inputs)
