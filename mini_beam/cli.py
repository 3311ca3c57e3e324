# mini_beam/cli.py
"""
Command line front end.

Examples:
  mini-beam --span 4 --ei 5000 --load 10
  mini-beam --span 4 --ei 5000 --load 10 --quantity bending-moment --step 0.5
  mini-beam --condition two-span-unequal --span 4 --secondary-span 6 \\
            --material glulam-gl24h-90x360 --w1 5 --w2 8 --plot out/two_span.png
"""

import argparse
import logging
import sys

import pandas as pd

from .analysis import InvalidCondition, Quantity, SupportCondition, analyze
from .catalog import DEFAULT_MATERIAL, MATERIALS, get_material
from .config import CONFIG
from .model import Beam, Material, TwoSpanLoad
from .sampling import default_step, to_series
from .units import kn_m2_to_n_mm2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=CONFIG.app_name,
        description='Closed-form deflection, bending moment and shear force for beams under UDL',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split('Examples:', 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        '--condition',
        default=CONFIG.default_condition,
        help=f"Support condition: {', '.join(c.value for c in SupportCondition)} "
             f"(default: {CONFIG.default_condition})"
    )
    parser.add_argument('--span', type=float, required=True, help='Primary span L1 (m)')
    parser.add_argument(
        '--secondary-span', type=float, default=0.0,
        help='Secondary span L2 (m), two-span condition only'
    )

    stiffness = parser.add_mutually_exclusive_group()
    stiffness.add_argument(
        '--ei', type=float,
        help='Flexural stiffness EI (kN·m² for simply-supported, N·mm² for two-span)'
    )
    stiffness.add_argument(
        '--material', choices=sorted(MATERIALS),
        help=f'Named material from the catalog (default: {DEFAULT_MATERIAL.name})'
    )

    parser.add_argument('--load', type=float, help='Uniform distributed load w (kN/m)')
    parser.add_argument('--w1', type=float, help='Span 1 load (kN/m), two-span condition only')
    parser.add_argument('--w2', type=float, help='Span 2 load (kN/m), two-span condition only')

    parser.add_argument(
        '--quantity',
        choices=[q.value for q in Quantity] + ['all'],
        default='all',
        help='Quantity to evaluate (default: all)'
    )
    parser.add_argument(
        '--points', type=int, default=CONFIG.default_n_points,
        help=f'Number of sample points (default: {CONFIG.default_n_points})'
    )
    parser.add_argument('--step', type=float, help='Sample spacing (m), overrides --points')
    parser.add_argument(
        '--j2', type=float, default=CONFIG.default_j2,
        help='Deflection scale factor for the two-span condition (default: 1.0)'
    )
    parser.add_argument(
        '--decimals', type=int, default=CONFIG.display_decimals,
        help=f'Decimal places in the printed table (default: {CONFIG.display_decimals})'
    )
    parser.add_argument('--plot', metavar='PATH', help='Save the diagrams to an image file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {CONFIG.version}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=CONFIG.log_format, datefmt=CONFIG.log_datefmt)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger(__package__).setLevel(level)


def _material(args, condition: SupportCondition) -> Material:
    if args.ei is not None:
        return Material(name='custom', properties={'EI': args.ei})
    material = get_material(args.material) if args.material else DEFAULT_MATERIAL
    if condition is SupportCondition.TWO_SPAN_UNEQUAL:
        # catalog stiffness is in kN·m², the two-span equations take N·mm²
        properties = dict(material.properties)
        properties['EI'] = kn_m2_to_n_mm2(properties['EI'])
        material = Material(name=material.name, properties=properties)
    return material


def _load(args, parser, condition: SupportCondition):
    per_span = args.w1 is not None or args.w2 is not None
    if per_span:
        if condition is not SupportCondition.TWO_SPAN_UNEQUAL:
            parser.error('--w1/--w2 are only valid with --condition two-span-unequal')
        if args.load is not None:
            parser.error('use either --load or --w1/--w2, not both')
        if args.w1 is None or args.w2 is None:
            parser.error('--w1 and --w2 must be given together')
        return TwoSpanLoad(w1=args.w1, w2=args.w2)
    if args.load is None:
        parser.error('a load is required (--load, or --w1 and --w2)')
    return args.load


def run(args, parser) -> pd.DataFrame:
    try:
        condition = SupportCondition.parse(args.condition)
    except InvalidCondition as exc:
        parser.error(str(exc))

    beam = Beam(
        primary_span=args.span,
        secondary_span=args.secondary_span,
        material=_material(args, condition),
    )
    load = _load(args, parser, condition)

    if args.step is not None:
        step = args.step
    else:
        step = default_step(beam, condition, args.points)
    stop = beam.total_length if condition is SupportCondition.TWO_SPAN_UNEQUAL else beam.primary_span

    quantities = list(Quantity) if args.quantity == 'all' else [Quantity(args.quantity)]
    table = None
    for quantity in quantities:
        result = analyze(beam, load, condition, quantity, j2=args.j2)
        series = to_series(result.sample(0.0, stop, step))
        if table is None:
            table = pd.DataFrame({'x': series.x})
        table[quantity.value] = series.y

    logger.debug("Evaluated %d points for %s", len(table), condition.value)

    if args.plot:
        from .viz import plot_beam_diagrams, save_figure
        fig = plot_beam_diagrams(beam, load, condition, j2=args.j2, step=step)
        save_figure(fig, args.plot)

    return table


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        table = run(args, parser)
    except ValueError as exc:
        parser.error(str(exc))

    print(table.round(args.decimals).to_string(index=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
