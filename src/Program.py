import argparse

from model.YieldInputs import YieldInputs
from tax.AMTDetails import AMTDetails
from calc.yield_calculator import TaxEquivalentYieldCalculator
from render.renderers import RENDERER_REGISTRY


# Example settings run by the command line
EXAMPLE_SPEC = {
    'fullyTaxable': 5.000,
    'treasury': 4.500,
    'natlTaxExempt': 3.800,
    'natlAmtPct': 20.0,
    'stateTaxExempt': 3.400,
    'stateAmtPct': 10.0,
    'amtFree': 3.700,
    'fedBracket': 24.0,
    'stateBracket': 9.3,
    'itemize': True,
    'amt': False,
    'amtBracketIndex': 0,  # ignored unless amt is set
}


def main():
    parser = argparse.ArgumentParser(
        description='Tax-equivalent yield calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  Report      Print after-tax and tax-equivalent yields for each bond category (default)
  TaxDetails  Print the applied tax settings followed by a yield table

Examples:
  python src/Program.py
  python src/Program.py --mode TaxDetails
        """
    )
    parser.add_argument('--mode', '-m',
                        choices=list(RENDERER_REGISTRY.keys()),
                        default='Report',
                        help='Output mode: Report (default) or TaxDetails')

    args = parser.parse_args()

    inputs = YieldInputs.from_spec(EXAMPLE_SPEC)
    calculator = TaxEquivalentYieldCalculator(AMTDetails())
    result = calculator.calculate(inputs)

    renderer = RENDERER_REGISTRY[args.mode]()
    renderer.render(result)


if __name__ == "__main__":
    main()
