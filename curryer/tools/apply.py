#!/usr/bin/env python3
import argparse
import importlib
import json
import logging
import sys

from curryer.common.configuration import CurryConfig
from curryer.common.errors import CurryError
from curryer.common.introspect import info
from curryer.utils.curry import DeferredCall, curry, function_arity, partial


def literal(arg):
    try:
        return json.loads(arg)
    except ValueError:
        return arg


def load_target(spec):
    module_name, sep, attr = spec.partition(':')
    if not sep or not module_name or not attr:
        raise argparse.ArgumentTypeError("target must look like module:function")
    try:
        target = importlib.import_module(module_name)
        for part in attr.split('.'):
            target = getattr(target, part)
    except (ImportError, AttributeError) as e:
        raise argparse.ArgumentTypeError(str(e))
    if not callable(target):
        raise argparse.ArgumentTypeError("{0} is not callable".format(spec))
    return target


def build_parser():
    parser = argparse.ArgumentParser(description='Curries or partially applies a function',
                                     epilog='Enjoy the program! :)')

    parser.add_argument('target',
                        type=load_target,
                        help='function to apply, as module:function')

    parser.add_argument('args',
                        nargs='*',
                        type=literal,
                        default=[],
                        help='arguments, parsed as JSON when possible')

    parser.add_argument('--mode',
                        choices=['curry', 'partial'],
                        default=None,
                        help='curry feeds one argument per call, partial feeds them all at once')

    parser.add_argument('--arity',
                        type=int,
                        default=None,
                        help='arity of the target when it cannot be discovered')

    parser.add_argument('--info',
                        action='store_true',
                        help='only inspect: fail instead of running the target when every argument is given')

    parser.add_argument('--configfile',
                        type=str,
                        default=None,
                        help='json configuration file')
    return parser


def run(target, args, mode, arity=None):
    if mode == 'partial':
        return partial(target, *args, arity=arity)
    step = curry(target, arity=arity)
    for arg in args:
        if not isinstance(step, DeferredCall):
            # the target returned before all arguments were fed
            raise CurryError("{0} takes fewer than {1} argument(s)".format(target, len(args)))
        step = step(arg)
    return step


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.configfile:
        config = CurryConfig.load_file(args.configfile)
    else:
        config = CurryConfig.default()
    config.setup_logging()

    mode = args.mode or config.mode
    try:
        if args.info:
            arity = args.arity if args.arity is not None else function_arity(args.target)
            if len(args.args) >= arity:
                parser.error("--info needs fewer than {0} argument(s), "
                             "otherwise the target runs".format(arity))
        outcome = run(args.target, args.args, mode, args.arity)
        if isinstance(outcome, DeferredCall):
            print(info(outcome).flatten())
        else:
            print(json.dumps(outcome, default=repr))
    except CurryError as e:
        logging.getLogger("curry-apply").error("%s", e)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
