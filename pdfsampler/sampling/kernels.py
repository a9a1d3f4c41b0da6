import numba


@numba.jit(nopython=True)
def bin_values(values, n_bins, counts):
	'''
	Adds each value to the counter of its bin. Values must already be in [0,1),
	a product x*n_bins that rounds up to n_bins goes to the top bin

	Arguments:
	- values: 1d array of values
	- n_bins: number of bins
	- counts: 1d integer array of length n_bins, updated in place
	'''
	n = len(values)
	for i in range(n):
		index = int(values[i] * n_bins)
		if index >= n_bins:
			index = n_bins - 1
		counts[index] += 1
	return n
