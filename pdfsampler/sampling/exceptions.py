'''
Exceptions raised by the sampling code. All of them are local, synchronous failures:
nothing here is retried, the caller of the violating operation receives the error directly
'''


class DomainError(ValueError):
	'''
	A value is outside of the half-open interval on which a function is defined
	(evaluating an inverse CDF or depositing into a histogram)
	'''
	def __init__(self, value, msg, domain = (0., 1.)):
		'''
		Initialization function

		Arguments:
		- value: offending value (scalar or array)
		- msg: error message
		- domain: (lower, upper) bounds of the valid interval, upper bound excluded
		'''
		self.value = value
		self.domain = domain
		super().__init__(msg)


class InvalidDistributionError(ValueError):
	'''
	Control points do not describe an inverse CDF: they must start at 0, end at 1 and never decrease
	'''
	def __init__(self, points, msg):
		'''
		Initialization function

		Arguments:
		- points: full set of control values, endpoints included
		- msg: error message
		'''
		self.points = points
		super().__init__(msg)


class EmptyHistogramError(ZeroDivisionError):
	'''
	A normalized PDF was requested from a histogram without any deposits
	'''
	pass


class ResolutionError(RuntimeError):
	'''
	The control points could not be resolved to the requested number of bins
	'''
	def __init__(self, n_points, n_bins, msg):
		self.n_points = n_points
		self.n_bins = n_bins
		super().__init__(msg)
