"""
Parse a markup document and show the resulting element tree.

By default the tree is written to standard output in JSON format.
Trailing text after the first element is reported but tolerated, unless --strict.
"""

import sys, argparse, json

from wickertools.combinators.interface import LanguageError, expect_complete
from wickertools.markup import grammar, tree
from wickertools.support import pretty

VERBOSE = False

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m wickertools', description=__doc__,)
	parser.add_argument('source_path', help='path to input file, or - for standard input')
	parser.add_argument('-i', '--indent', help='indent the JSON output for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('--strict', action='store_true', help='fail unless the whole input is a single element.')
	parser.add_argument('--markup', action='store_true', help='write the tree back out as markup rather than JSON.')
	parser.add_argument('--outline', action='store_true', help='display the tree as an indented outline on STDOUT.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk, mainly about how much input got consumed.")
	return parser.parse_args(argv)

def read_source(path):
	if path == '-': return sys.stdin.read()
	with open(path) as fh: return fh.read()

def main(args) -> int:
	global VERBOSE
	if args.verbose: VERBOSE = True
	document = read_source(args.source_path)
	outcome = grammar.parse(document)
	try:
		if args.strict or not outcome: root = expect_complete(outcome)
		else: root = outcome.value
	except LanguageError as e:
		print(e.args[0], file=sys.stderr)
		return 1
	if VERBOSE:
		print('Consumed %d of %d characters.'%(len(document) - len(outcome.remaining), len(document)), file=sys.stderr)
	if outcome.remaining:
		print('Ignoring unconsumed input: %r'%outcome.remaining[:40], file=sys.stderr)
	if args.outline: pretty.print_outline(root)
	elif args.markup: print(tree.render(root, indent=args.indent))
	else: print(json.dumps(root.as_dict(), indent=args.indent))
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
