'''
Fixed resolution histogram of values in [0,1), with equal width bins
'''
import numpy as np

from .config import get_dtype
from .exceptions import DomainError, EmptyHistogramError
from .kernels import bin_values


class BinnedPDF:
	'''
	Counts how many deposited values fall in each of n_bins equal width bins of [0,1)
	'''
	def __init__(self, n_bins, precision = 'double'):
		'''
		Initialization function. The histogram starts empty

		Arguments:
		- n_bins: number of bins, must be at least 1
		- precision: floating point precision of the normalized PDF and of the bin edges, 'single' or 'double'
		'''
		if int(n_bins) != n_bins or n_bins < 1:
			raise ValueError("Number of bins must be a positive integer, not {}".format(n_bins))
		self._n_bins = int(n_bins)
		self._dtype = get_dtype(precision)
		self._precision = precision
		self._pdf = np.zeros(self._n_bins, dtype = np.int64)
		self._count = 0

	def clear(self):
		'''
		Zeroes every counter and the total count
		'''
		self._pdf[:] = 0
		self._count = 0

	def deposit(self, x):
		'''
		Deposits a single value

		Arguments:
		- x: value in [0,1)
		'''
		if not (x >= 0 and x < 1):
			raise DomainError(x, "Deposited value {} is outside of [0,1)".format(x))
		index = min(int(x * self._n_bins), self._n_bins - 1)
		self._pdf[index] += 1
		self._count += 1

	def deposit_many(self, values):
		'''
		Deposits every value of an array. The array is checked before any counter is updated,
		so a single bad value leaves the histogram untouched

		Arguments:
		- values: array of values in [0,1)
		'''
		values = np.ravel(np.asarray(values))
		inside = (values >= 0) & (values < 1)
		if not np.all(inside):
			bad = values[~inside]
			raise DomainError(bad, "{} deposited value(s) outside of [0,1), first is {}".format(len(bad), bad[0]))
		self._count += bin_values(np.ascontiguousarray(values), self._n_bins, self._pdf)

	def merge(self, other):
		'''
		Adds the counters of another histogram with the same number of bins to this one

		Arguments:
		- other: BinnedPDF
		'''
		if len(other) != self._n_bins:
			raise ValueError("Cannot merge histograms with {} and {} bins".format(self._n_bins, len(other)))
		self._pdf += other.get_all_bins()
		self._count += other.count()
		return self

	def count(self):
		'''
		Number of values deposited since the last clear
		'''
		return self._count

	def get_pdf(self):
		'''
		Counter of each bin divided by the total count
		'''
		if self._count == 0:
			raise EmptyHistogramError("Cannot normalize a histogram without deposits")
		denom = self._dtype(1) / self._dtype(self._count)
		return self._pdf.astype(self._dtype) * denom

	def get_all_bins(self):
		return self._pdf.copy()

	def get_bin(self, index):
		'''
		Raw counter of a bin

		Arguments:
		- index: bin index, in [0, n_bins)
		'''
		if index < 0 or index >= self._n_bins:
			raise IndexError("Bin index must be in [0, {}), not {}".format(self._n_bins, index))
		return int(self._pdf[index])

	def get_bin_edges(self):
		return np.arange(self._n_bins + 1, dtype = self._dtype) / self._dtype(self._n_bins)

	def get_bin_centers(self):
		return (np.arange(self._n_bins, dtype = self._dtype) + self._dtype(0.5)) / self._dtype(self._n_bins)

	def __len__(self):
		return self._n_bins

	@property
	def n_bins(self):
		return self._n_bins

	@property
	def precision(self):
		return self._precision
