'''
Default run parameters. The environment variables PDFSAMPLER_N_ITER, PDFSAMPLER_CHUNK_SIZE and
PDFSAMPLER_OUTPUT override the defaults when set
'''
import os

import numpy as np

## number of deposits after which a run stops
N_ITER = int(os.getenv('PDFSAMPLER_N_ITER', 1000000))

## maximum number of groups drawn per vectorized step
CHUNK_SIZE = int(os.getenv('PDFSAMPLER_CHUNK_SIZE', 65536))

outdir = os.getenv('PDFSAMPLER_OUTPUT')
if outdir is None:
	outdir = ''

PRECISIONS = {'single' : np.float32, 'double' : np.float64}


def get_dtype(precision):
	'''
	Returns the numpy floating point type for a precision name

	Arguments:
	- precision: either 'single' or 'double'
	'''
	try:
		return PRECISIONS[precision]
	except KeyError:
		raise ValueError("Precision must be one of {}, not {!r}".format(sorted(PRECISIONS), precision)) from None
