import logging
import sys
from pathlib import Path

name = "expected"
description = """Use this command to compute the genome-wide expected contact density curve and per-chromosome scale factors from a .pairs file."""

from ..binnify import bin_pairs
from ..expected import ExpectedValueCalculation, NormalizationType
from ..genome import ChromosomeHandler
from ..hicio import parse_pairs
from ..paracalc import add_contacts
from ..Ps import expected_to_df, plot_expected_curve

logger = logging.getLogger(__name__)

def add_arguments(subparser):
    subparser.add_argument(
        "-i", "--input",
        type=str,
        required=True,
        help="Input .pairs(.gz) file."
    )
    subparser.add_argument(
        "-g", "--genome",
        type=str,
        default=None,
        help="Chromosome length file (chrom<TAB>length). Defaults to the #chromsize header of the pairs file."
    )
    subparser.add_argument(
        "-b", "--binsize",
        type=int,
        required=True,
        help="Bin size in bp."
    )
    subparser.add_argument(
        "--norm",
        choices=[t.value for t in NormalizationType],
        default=NormalizationType.NONE.value,
        help="Normalization label of the input counts (default: NONE)."
    )
    subparser.add_argument(
        "-t", "--threads",
        type=int,
        default=4,
        help="Number of threads feeding contacts (default: 4)."
    )
    subparser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output tsv of the expected curve. Print to stdout if not given."
    )
    subparser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Write a log-log plot of the curve to this html file."
    )

def run(args):
    if args.binsize <= 0:
        raise ValueError("binsize must be positive")
    print(f"Reading {args.input}", file=sys.stderr)
    pairs = parse_pairs(args.input)
    if args.genome is not None:
        chromsizes = args.genome
    else:
        if len(pairs.attrs["chromosomes"]) == 0:
            raise ValueError("No #chromsize header in pairs file, use -g to give chromosome lengths.")
        chromsizes = dict(zip(pairs.attrs["chromosomes"], pairs.attrs["lengths"]))
    handler = ChromosomeHandler.from_chromsizes(chromsizes)

    contacts = bin_pairs(pairs, handler, args.binsize)
    logger.info("%d pairs, %d intra-chromosomal pixels", len(pairs), len(contacts))

    calc = ExpectedValueCalculation(handler, args.binsize, NormalizationType(args.norm))
    add_contacts(calc, contacts, num_workers=args.threads)
    func = calc.get_expected_value_function()

    for chr_idx, factor in sorted(func.get_norm_factors().items()):
        logger.info("%s\tscale factor %.6g", handler.get_chromosome_from_index(chr_idx).name, factor)

    df = expected_to_df(func)
    if args.output is None:
        df.to_csv(sys.stdout, sep="\t", index=False)
    else:
        df.to_csv(args.output, sep="\t", index=False)
        print(f"Expected curve saved to {args.output}", file=sys.stderr)
    if args.plot is not None:
        plot_expected_curve(df).write_html(Path(args.plot))
