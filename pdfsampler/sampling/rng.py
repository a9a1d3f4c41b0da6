'''
Random number engines for the samplers. Single precision runs use a 32 bit Mersenne Twister,
double precision runs use the 64 bit PCG64 generator
'''
import numpy as np

from .config import get_dtype

ENGINES = {'single' : np.random.MT19937, 'double' : np.random.PCG64}


def get_rng_engine(precision = 'double', seed = None):
	'''
	Returns a new numpy Generator whose bit generator is chosen by the precision.
	If no seed is provided, fresh entropy is drawn from the operating system

	Arguments:
	- precision: either 'single' or 'double'
	- seed: anything accepted by numpy.random.SeedSequence (integer, SeedSequence or None)
	'''
	get_dtype(precision)
	if not isinstance(seed, np.random.SeedSequence):
		seed = np.random.SeedSequence(seed)
	return np.random.Generator(ENGINES[precision](seed))


def draw_uniform(engine, size, precision = 'double'):
	'''
	Draws uniform values in [0,1) with the floating point type of the precision

	Arguments:
	- engine: Generator-like object, must implement random(size, dtype)
	- size: shape of the output array
	- precision: either 'single' or 'double'
	'''
	return engine.random(size, dtype = get_dtype(precision))
