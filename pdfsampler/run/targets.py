'''
Input distributions for the sampler, all supported on [0,1).

The named functions are inverse CDFs that can be evaluated at the interior bin edges directly. The other
builders compute the inverse CDF at the bin edges from a probability density, either an analytic function
or a histogram (for instance the output of a previous run)
'''
import numpy as np
from scipy.integrate import cumulative_trapezoid

from pdfsampler.sampling.config import get_dtype
from pdfsampler.sampling.interpolant import PiecewiseLinearFunction


def identity(x):
	'''
	Inverse CDF of the uniform distribution
	'''
	return x


def quadratic(x):
	return x * (2 - x)


def symmetric(x):
	'''
	Inverse CDF that is symmetric about (1/2, 1/2), steep at both ends and flat at the center
	'''
	return 0.5 + np.where(x < 0.5, 1, -1) * (2 * x * (1 - x) - 0.5)


def cubic(x, k = -1):
	'''
	Cubic inverse CDF x (1 - k (x - 1) (x - 1/2)). Only monotonic for -4 <= k <= 2

	Arguments:
	- x: argument
	- k: shape parameter, k = 0 is the uniform distribution
	'''
	return x * (1 - k * (x - 1) * (x - 0.5))


TARGETS = {'identity' : identity, 'quadratic' : quadratic, 'symmetric' : symmetric, 'cubic' : cubic}


def control_points(function, n_bins, precision = 'double'):
	'''
	Evaluates an inverse CDF at the interior bin edges, returning the control points of an exact
	PiecewiseLinearFunction with n_bins bins

	Arguments:
	- function: inverse CDF, must accept numpy arrays
	- n_bins: number of bins
	- precision: either 'single' or 'double'
	'''
	edges = PiecewiseLinearFunction.interior_edges(n_bins, precision)
	return np.asarray(function(edges), dtype = get_dtype(precision))


def _invert(cum_values, x_values, n_bins):
	'''
	Inverts a normalized, non-decreasing CDF sampled at x_values and evaluates the result at the interior edges.
	Each u is interpolated on the step cum[j-1] < u <= cum[j], so flat stretches of the CDF are jumped over
	'''
	u = PiecewiseLinearFunction.interior_edges(n_bins)
	j = np.clip(np.searchsorted(cum_values, u, side = 'left'), 1, len(cum_values) - 1)
	c0, c1 = cum_values[j - 1], cum_values[j]
	x0, x1 = x_values[j - 1], x_values[j]
	points = x0 + (u - c0) / (c1 - c0) * (x1 - x0)
	return np.maximum.accumulate(np.clip(points, 0, 1))


def inverse_cdf_from_pdf(pdf, n_bins, n_samp = 1000, precision = 'double'):
	'''
	Integrates a probability density on [0,1] and returns its inverse CDF at the interior bin edges

	Arguments:
	- pdf: density function (eg a lambda function), must accept numpy arrays. Does not need to be normalized
	- n_bins: number of bins of the PiecewiseLinearFunction the points are for
	- n_samp: number of points on which the density is integrated
	- precision: either 'single' or 'double'
	'''
	x = np.linspace(0, 1, n_samp)
	y = np.asarray(pdf(x), dtype = float) * np.ones_like(x)
	if not np.all(np.isfinite(y)) or np.any(y < 0):
		raise ValueError("Probability density must be finite and non-negative on [0,1]")
	cum_values = cumulative_trapezoid(y, x, initial = 0)
	if cum_values[-1] <= 0:
		raise ValueError("Probability density integrates to zero on [0,1]")
	cum_values /= cum_values[-1]
	return _invert(cum_values, x, n_bins).astype(get_dtype(precision))


def inverse_cdf_from_histogram(binned_pdf, n_bins = None, precision = None):
	'''
	Inverse CDF, at the interior bin edges, of the distribution described by a filled BinnedPDF

	Arguments:
	- binned_pdf: BinnedPDF with at least one deposit
	- n_bins: number of bins of the PiecewiseLinearFunction the points are for, defaults to the histogram's
	- precision: either 'single' or 'double', defaults to the histogram's
	'''
	if n_bins is None:
		n_bins = len(binned_pdf)
	if precision is None:
		precision = binned_pdf.precision
	bin_edges = binned_pdf.get_bin_edges().astype(float)
	hist = binned_pdf.get_pdf().astype(float) * len(binned_pdf)
	cum_values = np.zeros(bin_edges.shape)
	cum_values[1:] = np.cumsum(hist * np.diff(bin_edges))
	cum_values /= cum_values[-1]
	return _invert(cum_values, bin_edges, n_bins).astype(get_dtype(precision))
