import argparse
import json
import logging
import sys

from . import simulation, util, wire
from .errors import DKGError
from .keygen import DEFAULT_CONTEXT


def main(argv=None):
    parser = argparse.ArgumentParser(prog='frostdkg', description='Run a local threshold key generation round')
    parser.add_argument('-n', '--num-participants', type=int, nargs='?', default=3,
                        help='Number of participants (default: %(default)s)')
    parser.add_argument('-t', '--threshold', type=int, nargs='?', default=None,
                        help='Threshold (default: ceil({} * participants))'.format(simulation.THRESHOLD_FACTOR))
    parser.add_argument('--context', nargs='?', default=DEFAULT_CONTEXT,
                        help='Context string bound into the proofs (default: %(default)s)')
    parser.add_argument('--corrupt', type=int, action='append', default=[],
                        help='Index of a dealer that publishes a bad proof (may be repeated)')
    parser.add_argument('--log-level', type=int, nargs='?', default=logging.INFO,
                        help='Logging level (default: %(default)s)')
    parser.add_argument('--log-format', nargs='?', default='%(message)s',
                        help='Logging message format (default: %(default)s)')
    args = parser.parse_args(argv)

    # args parsed; begin getting config stuff
    logging.basicConfig(level=args.log_level, format=args.log_format)

    threshold = args.threshold
    if threshold is None:
        threshold = simulation.default_threshold(args.num_participants)

    logging.info('running round with {} participants and threshold {}'.format(args.num_participants, threshold))

    try:
        result = simulation.run_simulated_dkg(args.num_participants, threshold, args.context, args.corrupt)
    except (DKGError, ValueError) as e:
        logging.error('round aborted: {}'.format(e))
        return 1

    for index in sorted(result.key_pairs):
        if result.rejected[index]:
            logging.warning('participant {} rejected dealers {}'.format(
                index, ', '.join(str(i) for i in result.rejected[index])))
        logging.debug('participant {}: {}'.format(index, json.dumps(wire.key_pair_to_message(result.key_pairs[index]))))

    honest = [kp for index, kp in sorted(result.key_pairs.items()) if index not in args.corrupt]
    if not honest:
        logging.error('no honest participants remain')
        return 1

    group_publics = set(kp.group_public for kp in honest)
    if len(group_publics) != 1:
        logging.error('participants disagree on the group public key')
        return 1

    print(util.curve_point_to_hex(group_publics.pop()))
    return 0


if __name__ == '__main__':
    sys.exit(main())
