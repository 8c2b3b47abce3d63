""" A worked example: parse a couple of small documents and dump the results. """

import json

from wickertools.markup import grammar

NESTED = """
	<top label="Top">
	  <semi-bottom label="Bottom"/>
	  <middle>
	    <bottom label="Another bottom"/>
	  </middle>
	</top>
""".replace('\t', '')  # The grammar has no patience for tabs.

SINGLE = '<div class="float"/>'

def dump(outcome):
	""" Show an outcome more or less the way a JSON-minded person would expect. """
	if outcome: return json.dumps({'result': outcome.value.as_dict(), 'remaining': outcome.remaining}, indent=2)
	return json.dumps({'error': outcome.error}, indent=2)

def main():
	print(dump(grammar.parse(NESTED)))
	print(dump(grammar.single_element()(SINGLE)))

if __name__ == '__main__': main()
