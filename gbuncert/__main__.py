#!/usr/bin/env python
''' gbuncert - Type A / Type B uncertainty calculator
    Command line interface.

    Multiple commands are installed:
        gbuncert: Calculate uncertainty of measurements given on the command line or in a data file
        gbuncertf: Calculate uncertainty from a setup (yaml) file
        gbuncerti: Interactive measurement session
'''
import os
import sys
import logging
import argparse

from gbuncert.errors import UncertaintyError
from gbuncert.series import parse_measurement, parse_measurements, parse_decimals
from gbuncert.distributions import names, get_distribution
from gbuncert.project import ProjectUncertainty
from gbuncert.session import Session


def _decimals(text):
    ''' argparse type for the number of report decimals '''
    try:
        return parse_decimals(text)
    except UncertaintyError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def _add_output_args(parser):
    parser.add_argument('-o', help='Output filename. Extension determines file format.',
                        type=argparse.FileType('w', encoding='UTF-8'), default=sys.stdout)
    parser.add_argument('-f', help="Output format for when output filename not provided ['txt', 'html', 'md']",
                        type=str, choices=['html', 'txt', 'md'])
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Verbose mode. Include summary table with one v, measurements, equations, and plots with two.')
    parser.add_argument('--debug', action='store_true', help='Show debug logging')


def _write_report(proj, args):
    ''' Write the project report in the format requested by args '''
    fmt = args.f
    if args.o and hasattr(args.o, 'name') and args.o.name != '<stdout>':
        _, fmt = os.path.splitext(str(args.o.name))
        fmt = fmt[1:]  # remove '.'

    if fmt in ['html', 'md']:
        r = proj.report_all() if args.verbose > 0 else proj.report_summary()
        if fmt == 'html':
            strreport = r.get_html(mathfmt='latex', figfmt='svg')
        else:
            strreport = r.get_md(mathfmt='latex', figfmt='svg')
    elif args.verbose > 1:
        strreport = proj.report_all().get_md(mathfmt='text', figfmt='text')
    elif args.verbose > 0:
        strreport = proj.report_summary().get_md(mathfmt='text', figfmt='text')
    else:
        strreport = proj.report_short()
    args.o.write(strreport + '\n')
    args.o.flush()


def main_calc(args=None):
    ''' Calculate uncertainty of measurements from the command line '''
    parser = argparse.ArgumentParser(prog='gbuncert', description='Compute Type A and Type B measurement uncertainty.')
    parser.add_argument('values', nargs='*', help='Measured values (e.g. 10.00 10.02 9.98)', type=str)
    parser.add_argument('--datafile', help='Text file of measured values separated by whitespace, commas, or semicolons',
                        type=argparse.FileType('r', encoding='UTF-8'))
    parser.add_argument('--limit', '-a', help='Type B limit error', type=str, default='0')
    parser.add_argument('--dist', '-d', help=f'Type B distribution ({", ".join(names())}, or 0, 1, 2)',
                        type=str, default='uniform')
    parser.add_argument('--decimals', help='Decimal places in the report', type=_decimals, default=6)
    parser.add_argument('-s', help='Short output format, prints values only. Prints '
                                   '(count, mean, std. dev, u_A, u_B, u_c, expanded)', action='store_true')
    _add_output_args(parser)
    args = parser.parse_args(args=args)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        values = [parse_measurement(v) for v in args.values]
        if args.datafile is not None:
            values.extend(parse_measurements(args.datafile.read()))
        proj = ProjectUncertainty()
        for value in values:
            proj.engine.append(value)
        proj.limit_error = parse_measurement(args.limit, 'Limit error')
        proj.distribution = get_distribution(args.dist)
        proj.decimals = args.decimals
        result = proj.calculate()
    except UncertaintyError as err:
        parser.exit(1, f'{parser.prog}: error: {err}\n')

    if args.s:
        vals = [result.mean, result.std_dev, result.u_a, result.u_b, result.u_c, result.expanded]
        args.o.write(f'{result.count}, ' + ', '.join(f'{v:.9g}' for v in vals) + '\n')
        args.o.flush()
    else:
        _write_report(proj, args)


def main_setup(args=None):
    ''' Run calculation defined in YAML setup file '''
    parser = argparse.ArgumentParser(prog='gbuncertf', description='Run uncertainty calculation from setup file.')
    parser.add_argument('filename', help='Setup parameter file.', type=str)
    _add_output_args(parser)
    args = parser.parse_args(args=args)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        proj = ProjectUncertainty.from_configfile(args.filename)
        proj.calculate()
    except (UncertaintyError, OSError) as err:
        parser.exit(1, f'{parser.prog}: error: {err}\n')
    _write_report(proj, args)


def main_interactive(args=None):
    ''' Interactive measurement session on stdin/stdout '''
    parser = argparse.ArgumentParser(prog='gbuncerti', description='Interactive Type A and Type B uncertainty session.')
    parser.add_argument('--limit', '-a', help='Initial Type B limit error', type=str, default='0')
    parser.add_argument('--dist', '-d', help=f'Initial Type B distribution ({", ".join(names())})',
                        type=str, default='uniform')
    parser.add_argument('--decimals', help='Decimal places in the report', type=_decimals, default=6)
    parser.add_argument('--debug', action='store_true', help='Show debug logging')
    args = parser.parse_args(args=args)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        session = Session(args.limit, args.dist, args.decimals)
    except UncertaintyError as err:
        parser.exit(1, f'{parser.prog}: error: {err}\n')

    print('Enter measurements one per line. Type "help" for commands.')
    while not session.done:
        try:
            line = input('> ')
        except EOFError:
            break
        out = session.execute(line)
        if out:
            print(out)


if __name__ == '__main__':
    main_calc()
