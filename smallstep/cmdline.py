"""
This is a small-step evaluator for the SIMPLE language.

{0}

For example:

    smallstep loop

will reduce the counting loop one step at a time and show every step.

    smallstep --list

will show what programs are available, and

    smallstep -h

will explain all the arguments.
"""
import sys, argparse
from .catalog import PROGRAMS
from .diagnostics import Report, ReductionError
from .machine import Machine, Budget

parser = argparse.ArgumentParser(
	prog="smallstep",
	description="Small-step evaluator for the SIMPLE language.",
)
parser.add_argument("program", nargs="?", help="try 'loop' for example.")
parser.add_argument('-l', "--list", action="store_true", help="List the available programs and stop.")
parser.add_argument('-n', "--max-steps", type=int, metavar="N", help="Stop after N reduction steps.")
parser.add_argument('-t', "--timeout", type=float, metavar="SECONDS", help="Stop after this much wall-clock time.")
parser.add_argument('-v', "--verbose", action="count", help="Chatter on stderr. Twice to log every step.")
parser.add_argument('-q', "--quiet", action="store_true", help="Print only the final state, not the whole trace.")

def run(args):
	report = Report(verbose=args.verbose)
	if args.list:
		for name in PROGRAMS: print(name)
		return 0
	try: factory = PROGRAMS[args.program]
	except KeyError:
		print("I know no program called %r. Try --list."%args.program, file=sys.stderr)
		return 1
	term, environment = factory()
	budget = Budget(args.max_steps, args.timeout)
	machine = Machine(term, environment, budget=budget, report=report)
	try: result = machine.run()
	except ReductionError as ex:
		report.complain_to_console(ex)
		return 1
	if args.quiet: report.show_final(result.final)
	else: report.show_trace(result.trace)
	if not result.finished():
		report.budget_exhausted(result)
		return 2
	return 0

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		return run(parser.parse_args(argv))
	else:
		print(__doc__.strip().format(parser.format_usage()))
		return 0

