"""
This puts type expressions into canonical form, or else explains why it cannot.

{0}

For example:

    hintalgebra "string|Foo&Bar|int"

will print "int|string|(\\Bar&\\Foo)", because nested intersections
sort after the plain types, and always get parentheses.

    hintalgebra -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="hintalgebra",
	description="Canonicalize union and intersection type expressions.",
)
parser.add_argument("expressions", nargs="+", help='try "Foo&Bar|null" for example.')
parser.add_argument('-d', "--doc", action="store_true", help="Print the documentation form (bare class names) instead of the declaration form.")
parser.add_argument('-c', "--check", action="count", help="Check the expressions but print nothing on success. Repeat for more chatter.")
parser.add_argument('-t', "--tree", action="store_true", help="Also print the structure of each expression.")
parser.add_argument('-m', "--max-issues", type=int, default=10, help="Give up after this many bad expressions.")

def run(args, report=None):
	from .diagnostics import Report, TooManyIssues
	from .ontology import TypeExpressionError
	from .hint import TypeHint
	from .rendering import tree
	if report is None: report = Report(verbose=args.check, max_issues=args.max_issues)
	try:
		for expression in args.expressions:
			try: hint = TypeHint.from_string(expression)
			except TypeExpressionError as ex:
				report.bad_expression(expression, ex)
				continue
			report.info("%r is %s"%(expression, hint.declaration()))
			if args.check: continue
			print(str(hint) if args.doc else hint.declaration())
			if args.tree:
				print("\n".join(tree(hint.type, "    ")))
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
