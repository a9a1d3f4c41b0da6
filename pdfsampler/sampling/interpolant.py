'''
Piecewise linear approximation of an inverse CDF on [0,1), defined on equal width bins.

The function is built from the values it takes at the interior bin edges (the endpoints (0,0) and (1,1)
are implied). Depending on how many values are provided, they are resolved to the full set of bin edges in
one of three ways:
- exact: one value per interior edge, used as they are
- half: one value for every other interior edge, the missing ones are the mean of their neighbours
- other: any other number of values, which are first turned into an exact function at their own resolution
  and then evaluated at the interior edges of the requested resolution
'''
import copy
import logging

import numpy as np

from .config import get_dtype
from .exceptions import DomainError, InvalidDistributionError, ResolutionError

logger = logging.getLogger(__name__)

EXACT = 'exact'
HALF = 'half'
OTHER = 'other'

SLOPE = 0
INTERCEPT = 1


def resolution_regime(n_points, n_bins):
	'''
	Classifies how n_points interior values relate to a function with n_bins bins

	Arguments:
	- n_points: number of interior values provided
	- n_bins: number of bins of the function
	'''
	if n_points + 1 == n_bins:
		return EXACT
	if 2 * (n_points + 1) == n_bins:
		return HALF
	return OTHER


class PiecewiseLinearFunction:
	'''
	Piecewise linear function y = m_n x + b_n, with one (m_n, b_n) pair per bin
	'''
	def __init__(self, points, n_bins, precision = 'double'):
		'''
		Initialization function

		Arguments:
		- points: values of the function at the interior bin edges, not including the endpoints 0 and 1
		- n_bins: number of bins, must be at least 1
		- precision: either 'single' or 'double'
		'''
		if int(n_bins) != n_bins or n_bins < 1:
			raise ValueError("Number of bins must be a positive integer, not {}".format(n_bins))
		self._n_bins = int(n_bins)
		self._dtype = get_dtype(precision)
		self._precision = precision

		points = np.asarray(points, dtype = self._dtype)
		if points.ndim != 1:
			raise ValueError("Control points must be a 1d sequence")

		self._regime = resolution_regime(len(points), self._n_bins)
		logger.debug("Resolving %d control points to %d bins (%s)", len(points), self._n_bins, self._regime)

		if self._regime == EXACT:
			all_points = self._exactPoints(points)
		elif self._regime == HALF:
			all_points = self._halfPoints(points)
		else:
			all_points = self._otherPoints(points)

		self._constructCoefficients(all_points)

	@staticmethod
	def interior_edges(n_bins, precision = 'double'):
		'''
		Interior bin edges (n_bins - 1 values) for a function with n_bins bins.
		Control points for an exact function are the function values at these edges

		Arguments:
		- n_bins: number of bins
		- precision: either 'single' or 'double'
		'''
		dtype = get_dtype(precision)
		return np.arange(1, n_bins, dtype = dtype) / dtype(n_bins)

	def _exactPoints(self, points):
		all_points = np.empty(self._n_bins + 1, dtype = self._dtype)
		all_points[0] = 0
		all_points[1:self._n_bins] = points
		all_points[self._n_bins] = 1
		return all_points

	def _halfPoints(self, points):
		half = self._dtype(0.5)
		all_points = np.empty(self._n_bins + 1, dtype = self._dtype)
		all_points[0] = 0
		for n in range(len(points)):
			all_points[2*n + 1] = half * (all_points[2*n] + points[n])
			all_points[2*n + 2] = points[n]
		last = points[-1] if len(points) > 0 else self._dtype(0)
		all_points[self._n_bins - 1] = half * (last + self._dtype(1))
		all_points[self._n_bins] = 1
		return all_points

	def _otherPoints(self, points):
		return self._exactPoints(bootstrap_points(points, self._n_bins, self._precision))

	def _checkPoints(self, all_points):
		if not np.all(np.isfinite(all_points)):
			raise InvalidDistributionError(all_points, "Control points must be finite")
		if all_points[0] != 0:
			raise InvalidDistributionError(all_points, "Inverse CDF must start at 0, not {}".format(all_points[0]))
		if all_points[-1] != 1:
			raise InvalidDistributionError(all_points, "Inverse CDF must end at 1, not {}".format(all_points[-1]))
		decreasing = np.flatnonzero(np.diff(all_points) < 0)
		if len(decreasing) > 0:
			n = decreasing[0]
			raise InvalidDistributionError(all_points,
				"Inverse CDF must be non-decreasing, but point {} ({}) > point {} ({})".format(n, all_points[n], n + 1, all_points[n + 1]))

	def _constructCoefficients(self, all_points):
		'''
		Connects consecutive (edge, value) pairs with a line
		'''
		self._checkPoints(all_points)
		x = self.get_bin_edges()
		x0, x1 = x[:-1], x[1:]
		y0, y1 = all_points[:-1], all_points[1:]

		coefficients = np.empty((self._n_bins, 2), dtype = self._dtype)
		m = (y1 - y0) / (x1 - x0)
		coefficients[:, SLOPE] = m
		coefficients[:, INTERCEPT] = y1 - m * x1

		self._points = all_points
		self._coefficients = coefficients
		self._points.setflags(write = False)
		self._coefficients.setflags(write = False)

	def __deepcopy__(self, memo):
		new = self.__class__.__new__(self.__class__)
		memo[id(self)] = new
		for key, value in self.__dict__.items():
			setattr(new, key, copy.deepcopy(value, memo))
		new._points.setflags(write = False)
		new._coefficients.setflags(write = False)
		return new

	def __call__(self, x):
		'''
		Evaluates the function. Accepts a scalar or an array, every value must be in [0,1)

		Arguments:
		- x: value(s) at which the function is evaluated
		'''
		x_in = np.asarray(x)
		if not np.all((x_in >= 0) & (x_in < 1)):
			raise DomainError(x, "Inverse CDF is only defined on [0,1)")
		x_in = x_in.astype(self._dtype, copy = False)

		index = np.minimum((x_in * self._n_bins).astype(np.int64), self._n_bins - 1)
		m = self._coefficients[index, SLOPE]
		b = self._coefficients[index, INTERCEPT]
		# never leave the segment between the two edge values
		y = np.clip(m * x_in + b, self._points[index], self._points[index + 1])
		if y.ndim == 0:
			return self._dtype(y)
		return y

	def __len__(self):
		return self._n_bins

	def __repr__(self):
		return '{}(n_bins={}, precision={!r}, regime={!r})'.format(type(self).__name__, self._n_bins, self._precision, self._regime)

	@property
	def n_bins(self):
		return self._n_bins

	@property
	def dtype(self):
		return self._dtype

	@property
	def precision(self):
		return self._precision

	@property
	def regime(self):
		'''
		Which of 'exact', 'half' or 'other' was used to resolve the control points
		'''
		return self._regime

	def get_bin_edges(self):
		'''
		All n_bins + 1 bin edges, from 0 to 1
		'''
		return np.arange(self._n_bins + 1, dtype = self._dtype) / self._dtype(self._n_bins)

	def get_interior_edges(self):
		'''
		The n_bins - 1 bin edges strictly between 0 and 1
		'''
		return self.get_bin_edges()[1:-1]

	def get_bin_centers(self):
		return (np.arange(self._n_bins, dtype = self._dtype) + self._dtype(0.5)) / self._dtype(self._n_bins)

	def get_control_points(self):
		'''
		Function values at all bin edges, endpoints included
		'''
		return self._points.copy()

	def get_coefficients(self):
		'''
		(n_bins, 2) array of slopes and intercepts
		'''
		return self._coefficients.copy()


def bootstrap_points(points, n_bins, precision = 'double', max_depth = 1):
	'''
	Resolves control points to the n_bins - 1 interior edges of a function with n_bins bins. Each step
	builds the exact function at the resolution of the current points and evaluates it at the target
	edges, so a single step always lands on the exact regime

	Arguments:
	- points: values at the interior edges of a coarser or finer function
	- n_bins: number of bins of the target function
	- precision: either 'single' or 'double'
	- max_depth: maximum number of intermediate functions
	'''
	n_points = len(points)
	edges = PiecewiseLinearFunction.interior_edges(n_bins, precision)
	for _ in range(max_depth):
		if resolution_regime(len(points), n_bins) == EXACT:
			break
		temp_func = PiecewiseLinearFunction(points, len(points) + 1, precision)
		points = temp_func(edges)

	if resolution_regime(len(points), n_bins) != EXACT:
		raise ResolutionError(n_points, n_bins,
			"Unable to resolve {} control points to {} bins".format(n_points, n_bins))
	return points
