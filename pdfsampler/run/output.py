'''
Tables of the sampled output distribution
'''
import os

import numpy as np
import astropy.table as tb

from pdfsampler.sampling import config


def pdf_table(binned_pdf):
	'''
	Table with the bin index, bin center and normalized PDF of each bin

	Arguments:
	- binned_pdf: BinnedPDF with at least one deposit
	'''
	table = tb.Table()
	table['BIN'] = np.arange(len(binned_pdf), dtype = 'i8')
	table['CENTER'] = binned_pdf.get_bin_centers().astype('f8')
	table['PDF'] = binned_pdf.get_pdf().astype('f8')
	table['CENTER'].format = '%8.6f'
	table['PDF'].format = '%9.6f'
	return table


def output_filename(deposit_all, outdir = None):
	'''
	Name of the file for a run: pdf_true.txt if every value of a group was deposited, pdf_false.txt otherwise

	Arguments:
	- deposit_all: deposit mode of the run
	- outdir: output directory, defaults to $PDFSAMPLER_OUTPUT (or the working directory)
	'''
	if outdir is None:
		outdir = config.outdir
	return os.path.join(outdir, 'pdf_{}.txt'.format('true' if deposit_all else 'false'))


def write_pdf(binned_pdf, filename):
	'''
	Writes the table from pdf_table. Files ending in .fits are written as FITS, anything else as ascii

	Arguments:
	- binned_pdf: BinnedPDF with at least one deposit
	- filename: output path, overwritten if it exists
	'''
	table = pdf_table(binned_pdf)
	if filename.endswith('.fits'):
		table.write(filename, overwrite = True)
	else:
		table.write(filename, format = 'ascii.basic', overwrite = True)
	return table
