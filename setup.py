"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='contour-shapes',
	version='0.1.0',
	packages=['contour', ],
	license='MIT',
	description='An algebra of structural shapes: subtyping, merging, path-flattening, and filtering',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Topic :: Software Development :: Quality Assurance",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
