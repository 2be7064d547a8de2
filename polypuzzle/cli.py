import argparse
import logging

from polypuzzle.display import plot_result
from polypuzzle.matcher import Config, best_match
from polypuzzle.reader import PolygonParseError, read_cases
from polypuzzle.utils import logger, log
from polypuzzle.writers import WRITERS, make_writers


def positive_int(value):
    try:
        value = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not an integer' % value)
    if value < 1:
        raise argparse.ArgumentTypeError('should be at least 1')
    return value


def positive_float(value):
    try:
        value = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not a number' % value)
    if value <= 0:
        raise argparse.ArgumentTypeError('should be positive')
    return value


def make_parser():
    parser = argparse.ArgumentParser(description='Fit two polygons edge to edge along the longest shared boundary.')
    parser.add_argument('-i', dest='input', type=argparse.FileType('r'), default='-',
                        help='Polygon pairs, stdin by default')
    parser.add_argument('-o', dest='output', help='Results directory')
    parser.add_argument('-f', dest='formats', action='append', choices=sorted(WRITERS), default=[],
                        help='Result files to write in the results directory')
    parser.add_argument('-j', dest='workers', type=positive_int, default=Config.workers,
                        help='Worker processes, one per CPU by default')
    parser.add_argument('--min-gap', dest='min_gap', type=positive_float, default=Config.min_shift_gap,
                        help='Smallest distance between two tried shifts')
    parser.add_argument('--chains', action='store_true', help='Also print the number of shared boundary runs')
    parser.add_argument('--show', action='store_true', help='Plot every solution')
    parser.add_argument('-v', dest='verbose', action='store_true')
    return parser


def parse_args(args=None):
    parser = make_parser()
    ns = parser.parse_args(args)

    if ns.formats and not ns.output:
        parser.error('-f needs a results directory (-o)')

    config = Config()
    config.workers = ns.workers
    config.min_shift_gap = ns.min_gap

    return (ns.input, ns.output, ns.formats, config, ns.chains, ns.show, ns.verbose)


def run(stream, output, formats, config, chains=False, show=False, out=None):
    cases = read_cases(stream)

    writers = make_writers(formats, output) if formats else []
    try:
        for case_number, (polygon1, polygon2) in enumerate(cases, 1):
            log('case #%s' % case_number)
            result = best_match(polygon1, polygon2, config)
            if chains:
                print('%.12f %d' % (result.boundary, len(result.chains())), file=out)
            else:
                print('%.12f' % result.boundary, file=out)

            for writer in writers:
                writer.write_result(case_number, result)

            if show:
                plot_result(result)
    finally:
        for writer in writers:
            writer.close()


def main(args=None):
    stream, output, formats, config, chains, show, verbose = parse_args(args)
    if verbose:
        logger.setLevel(logging.DEBUG)

    try:
        run(stream, output, formats, config, chains, show)
    except PolygonParseError as e:
        make_parser().error(str(e))


if __name__ == '__main__':
    main()
