import unittest
import io, json
from contextlib import redirect_stdout

import example.markup_demo as demo

from wickertools.markup import grammar


class TestMarkupDemo(unittest.TestCase):
	def test_nested_document(self):
		outcome = grammar.parse(demo.NESTED)
		self.assertEqual('', outcome.remaining)
		top = outcome.value
		self.assertEqual('Top', top.attribute('label'))
		self.assertEqual(['semi-bottom', 'middle'], [child.name for child in top.children])
		self.assertEqual('Another bottom', top.children[1].children[0].attribute('label'))

	def test_dump(self):
		data = json.loads(demo.dump(grammar.single_element()(demo.SINGLE)))
		self.assertEqual({'name': 'div', 'attributes': [['class', 'float']], 'children': []}, data['result'])
		self.assertEqual('', data['remaining'])
		self.assertEqual({'error': '</b>'}, json.loads(demo.dump(grammar.parse('<a></b>'))))

	def test_main_runs(self):
		out = io.StringIO()
		with redirect_stdout(out): demo.main()
		self.assertIn('"semi-bottom"', out.getvalue())
		self.assertIn('"float"', out.getvalue())


if __name__ == '__main__':
	unittest.main()
