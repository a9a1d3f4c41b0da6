'''
Monte Carlo estimate of the distribution of normalized sums of draws from an input distribution.

Each group of n_sum draws from the input distribution (given by its inverse CDF) is divided by its sum,
so the group lies on the simplex, and the result is recorded in a BinnedPDF. With n_sum = 1 the draws
are recorded as they are, which checks the sampling step itself against the input distribution.
'''
import copy
import logging

import numpy as np

from .binnedpdf import BinnedPDF
from .config import N_ITER, CHUNK_SIZE
from .interpolant import PiecewiseLinearFunction
from .rng import get_rng_engine, draw_uniform

logger = logging.getLogger(__name__)


def nudge_up(values):
	'''
	Moves every value one floating point step towards 1. Applied to the raw draws so that a group
	can never sum to zero. The bias this introduces is on par with the rounding already present

	Arguments:
	- values: array of values in [0,1]
	'''
	return np.nextafter(values, values.dtype.type(1))


def normalize_groups(values):
	'''
	Divides each row by its sum. Rows with a single element are returned unchanged

	Arguments:
	- values: (n_groups, n_sum) array of positive values
	'''
	if values.shape[-1] > 1:
		values = values / values.sum(axis = -1, keepdims = True)
	return values


def clamp_draws(values):
	'''
	Moves draws equal to 1 one floating point step towards 0, so that random sources returning values
	in [0,1] can be used with the inverse CDF, which is only defined on [0,1)

	Arguments:
	- values: array of values in [0,1]
	'''
	return np.where(values < 1, values, np.nextafter(values, values.dtype.type(0)))


def correct_boundary(values):
	'''
	Moves every value one floating point step towards 0, so a value that came out as exactly 1
	is deposited in the last bin instead of falling outside of [0,1)

	Arguments:
	- values: array of values in [0,1]
	'''
	return np.nextafter(values, values.dtype.type(0))


class ProbabilitySampler:
	'''
	Samples the output distribution of an input distribution, given by a piecewise linear inverse CDF
	'''
	def __init__(self, inverse_cdf, n_sum = 1, deposit_all = True, n_iter = N_ITER, seed = None,
			rng_factory = get_rng_engine, chunk_size = CHUNK_SIZE):
		'''
		Initialization function

		Arguments:
		- inverse_cdf: PiecewiseLinearFunction of the input distribution, a copy is kept
		- n_sum: number of draws summed and normalized per group
		- deposit_all: if True, every value of a group is deposited, otherwise only the first one
		- n_iter: number of deposits after which generate stops
		- seed: seed for the random engine, anything numpy.random.SeedSequence accepts. Each call to
		  generate uses a new child of this seed, so repeated runs are independent
		- rng_factory: function (precision, seed) that returns an object with a random(size, dtype) method
		  drawing uniform values in [0,1)
		- chunk_size: maximum number of groups drawn at once
		'''
		if not isinstance(inverse_cdf, PiecewiseLinearFunction):
			raise TypeError("inverse_cdf must be a PiecewiseLinearFunction, not {}".format(type(inverse_cdf).__name__))
		if int(n_sum) != n_sum or n_sum < 1:
			raise ValueError("Group size (n_sum) must be a positive integer, not {}".format(n_sum))
		if int(n_iter) != n_iter or n_iter < 0:
			raise ValueError("Number of iterations (n_iter) must be a non-negative integer, not {}".format(n_iter))
		if int(chunk_size) != chunk_size or chunk_size < 1:
			raise ValueError("Chunk size must be a positive integer, not {}".format(chunk_size))

		self.inverse_cdf = copy.deepcopy(inverse_cdf)
		self.n_sum = int(n_sum)
		self.deposit_all = bool(deposit_all)
		self.n_iter = int(n_iter)
		self.chunk_size = int(chunk_size)
		self.precision = self.inverse_cdf.precision
		self.pdf = BinnedPDF(self.inverse_cdf.n_bins, self.precision)

		self._rng_factory = rng_factory
		if isinstance(seed, np.random.SeedSequence):
			self._seed = seed
		else:
			self._seed = np.random.SeedSequence(seed)
		self._engine = None

	@classmethod
	def from_points(cls, points, n_bins, precision = 'double', **kwargs):
		'''
		Builds the inverse CDF from its control points, then the sampler

		Arguments:
		- points: values of the inverse CDF at the interior bin edges (see PiecewiseLinearFunction)
		- n_bins: number of bins
		- precision: either 'single' or 'double'
		- remaining keyword arguments are passed to the initialization function
		'''
		return cls(PiecewiseLinearFunction(points, n_bins, precision), **kwargs)

	def _continueCondition(self):
		return self.pdf.count() < self.n_iter

	def _setUpRng(self):
		self._engine = self._rng_factory(self.precision, self._seed.spawn(1)[0])

	def _perGroup(self):
		'''
		Deposits made by each group
		'''
		return self.n_sum if self.deposit_all else 1

	def _nChunks(self):
		n_groups = -(-self.n_iter // self._perGroup())
		return -(-n_groups // self.chunk_size)

	def _generateRandomNumbers(self, n_groups):
		y = draw_uniform(self._engine, (n_groups, self.n_sum), self.precision)
		return nudge_up(self.inverse_cdf(clamp_draws(y)))

	def _generateNormalizedValues(self, n_groups):
		values = correct_boundary(normalize_groups(self._generateRandomNumbers(n_groups)))
		if self.deposit_all:
			return values
		return values[:, 0]

	def _depositValues(self, values):
		self.pdf.deposit_many(values)

	def generate(self, progress = False):
		'''
		Runs the sampling loop until n_iter values have been deposited and returns the histogram.
		The histogram is owned by the sampler and is cleared by the next call

		Arguments:
		- progress: if True, shows a progress bar
		'''
		self.pdf.clear()
		self._setUpRng()
		logger.debug("Sampling %d values, %d bins, n_sum = %d, deposit_all = %s", self.n_iter, self.pdf.n_bins, self.n_sum, self.deposit_all)

		chunks = range(self._nChunks())
		if progress == True:
			from rich.progress import track
			chunks = track(chunks, description = 'Sampling...')

		per_group = self._perGroup()
		for _ in chunks:
			if not self._continueCondition():
				break
			remaining = self.n_iter - self.pdf.count()
			n_groups = min(-(-remaining // per_group), self.chunk_size)
			self._depositValues(self._generateNormalizedValues(n_groups))

		logger.debug("Sampling finished with %d deposits", self.pdf.count())
		return self.pdf
