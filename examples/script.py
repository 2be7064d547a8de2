import os

from polypuzzle.display import plot_result
from polypuzzle.matcher import Config, best_match
from polypuzzle.reader import read_cases
from polypuzzle.writers import make_writers

HERE = os.path.dirname(os.path.abspath(__file__))


def match_pieces(config=None, show=True):
    with open(os.path.join(HERE, 'pieces.txt')) as f:
        cases = read_cases(f)

    writers = make_writers(['svg', 'json'], os.path.join(HERE, 'results'))
    try:
        for case_number, (polygon1, polygon2) in enumerate(cases, 1):
            result = best_match(polygon1, polygon2, config)
            print('case #{0}: boundary={1:.6f} runs={2}'.format(case_number, result.boundary, len(result.chains())))
            for writer in writers:
                writer.write_result(case_number, result)
            if show:
                plot_result(result)
    finally:
        for writer in writers:
            writer.close()


if __name__ == '__main__':
    config = Config()
    config.workers = 2
    match_pieces(config)
