import setuptools
from setuptools import setup

print("Using setuptools version",setuptools.__version__)


dependencies = ['numpy', 'scipy', 'numba', 'astropy', 'rich']

test_dependencies = ['pytest', 'parameterized']

with open('README.md') as file:
	long_description = file.read()


dist = setup(
	name = "PDFSAMPLER",
	version = "0.1.0",
	description = "Monte Carlo estimates of the distribution of normalized sums of draws from a binned inverse CDF",
	long_description = long_description,
	long_description_content_type='text/markdown',
	license = "BSD License",
	packages = ['pdfsampler', 'pdfsampler.sampling', 'pdfsampler.run'],
	python_requires = '>=3.8',
	install_requires = dependencies,
	extras_require = {'test' : test_dependencies},
	entry_points = {'console_scripts' : ['pdfsampler = pdfsampler.run.driver:main']},)
