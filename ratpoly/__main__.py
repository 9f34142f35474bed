"""Support for interactive console with RatPoly preloaded.

To launch a Python console with RatPoly preloaded, run:

    python -m ratpoly

This effectively executes the following code before handing over control:

    from ratpoly.rationals import RatNum
    from ratpoly.terms import RatTerm
    from ratpoly.polynomials import RatPoly
    x = RatPoly('x')

Expressions like (x*x*x + x - 1) // (x + 1) can then be evaluated directly,
as well as RatPoly.value_of('x^3+x-1').div(RatPoly.value_of('x+1')).

Use -V to print the version number of RatPoly and -H for help.
"""

import code
import sys
import ratpoly

PREAMBLE = ('from ratpoly.rationals import RatNum',
            'from ratpoly.terms import RatTerm',
            'from ratpoly.polynomials import RatPoly',
            "x = RatPoly('x')")


def main(args=None, preamble=PREAMBLE):
    """Run interactive console, after executing preamble lines of code."""
    parser = ratpoly.get_arg_parser()
    options = parser.parse_known_args(args)[0]
    if options.VERSION:
        print(f'RatPoly {ratpoly.__version__}')
        return

    if options.HELP:
        parser.print_help()
        return

    console = code.InteractiveConsole({'__name__': '__console__'})
    prompt = getattr(sys, 'ps1', '>>> ')
    input_lines = ''.join(f'\n{prompt}{line}' for line in preamble)
    banner = (f'Python {sys.version} on {sys.platform}\n'
              f'RatPoly {ratpoly.__version__} console.'
              f'{input_lines}')
    for line in preamble:
        console.push(line)  # NB: line does not appear in history
    console.interact(banner=banner, exitmsg='exiting RatPoly console...')


if __name__ == '__main__':
    main()
