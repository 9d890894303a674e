import setuptools

setuptools.setup(
	name='utf8-range-checker',
	version='0.1.0',
	packages=[
		'rangecheck',
		'rangecheck.scanning',
		'rangecheck.support',
	],
	description='Check that a UTF-8 byte stream only contains code points from given ranges',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
