"""
This prints the records defined in a Python specimen file,
each one found through the shared dispatchers.

{0}

For example:

    pseudoclass examples/pets.py

will describe every record in pets.py, or else try to explain why not.

    pseudoclass -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="pseudoclass",
	description="Describe the records in a specimen file through manual dispatch.",
)
parser.add_argument("specimen", help="try examples/pets.py for example.")
parser.add_argument('-c', "--check", action="count", help="Check the records verbosely but do not actually print them.")
parser.add_argument('-s', "--summarize", action="store_true", help="Print plain summaries instead of descriptions.")
parser.add_argument('-m', "--max-issues", type=int, default=3, help="Give up after this many issues. Default %(default)s.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .loader import Yuck, load_specimen, check_records
	from .ontology import print_describe, print_summarize
	report = Report(verbose=args.check, max_issues=args.max_issues)
	try:
		try: specimen = load_specimen(args.specimen, report)
		except Yuck:
			assert report.sick()
			report.complain_to_console()
			return 1
		check_records(specimen, report)
		if report.sick():
			report.complain_to_console()
			return 1
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	else:
		dispatcher = print_summarize if args.summarize else print_describe
		for record in specimen.records.values():
			dispatcher(record)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
