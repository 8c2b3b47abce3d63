import setuptools

setuptools.setup(
	name='wicker-tools',
	version='0.1.0',
	packages=[
		'wickertools',
		'wickertools.combinators',
		'wickertools.markup',
		'wickertools.support',
	],
	description='Hand-woven parser combinators, and a small markup grammar built from them',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Topic :: Text Processing :: Markup :: XML",
		"Development Status :: 3 - Alpha",
	],
)
