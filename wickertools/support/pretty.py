""" Bits and bobs in support of visualizing parse trees. """

TEE = '├─ '
ELBOW = '└─ '
PIPE = '│  '
BLANK = '   '

def describe(element) -> str:
	""" One line: the tag name followed by its attributes. """
	return ' '.join([element.name] + ['%s=%r'%pair for pair in element.attributes])

def outline(element) -> list:
	""" The tree as lines of text, with box-drawing connectors between parent and child. """
	lines = [describe(element)]
	_branches(element.children, '', lines)
	return lines

def _branches(children, prefix, lines):
	for i, child in enumerate(children):
		last = i == len(children) - 1
		lines.append(prefix + (ELBOW if last else TEE) + describe(child))
		_branches(child.children, prefix + (BLANK if last else PIPE), lines)

def print_outline(element):
	print('\n'.join(outline(element)))
