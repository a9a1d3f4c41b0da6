'''
Command line driver: samples the output distribution of a named input distribution and writes
one table per deposit mode
'''
import argparse
import functools
import logging

import numpy as np

from pdfsampler.sampling.config import N_ITER, PRECISIONS
from pdfsampler.sampling.interpolant import PiecewiseLinearFunction
from pdfsampler.sampling.sampler import ProbabilitySampler
from pdfsampler.run.targets import TARGETS, control_points
from pdfsampler.run.output import output_filename, write_pdf

logger = logging.getLogger(__name__)

MODES = {'true' : [True], 'false' : [False], 'both' : [True, False]}


def run(function, n_bins, n_sum = 1, deposit_all = True, n_iter = N_ITER, precision = 'double', seed = None, progress = False):
	'''
	Samples the output distribution for one deposit mode and returns the filled BinnedPDF

	Arguments:
	- function: inverse CDF of the input distribution, evaluated at the interior bin edges
	- n_bins: number of bins
	- n_sum: number of draws summed and normalized per group
	- deposit_all: deposit every value of a group (True) or only the first one (False)
	- n_iter: number of deposits
	- precision: either 'single' or 'double'
	- seed: seed for the random engine
	- progress: shows a progress bar
	'''
	inverse_cdf = PiecewiseLinearFunction(control_points(function, n_bins, precision), n_bins, precision)
	sampler = ProbabilitySampler(inverse_cdf, n_sum = n_sum, deposit_all = deposit_all, n_iter = n_iter, seed = seed)
	return sampler.generate(progress = progress)


def build_parser():
	parser = argparse.ArgumentParser(description = 'Monte Carlo estimate of the distribution of normalized sums of draws')
	parser.add_argument('--n-bins', type = int, default = 8, help = 'number of bins of the input and output distributions')
	parser.add_argument('--n-sum', type = int, default = 1, help = 'number of draws summed and normalized per group')
	parser.add_argument('--deposit-all', choices = sorted(MODES), default = 'both',
						help = 'deposit every value of a group (true), only the first one (false) or run both')
	parser.add_argument('--n-iter', type = int, default = N_ITER, help = 'number of deposits per run')
	parser.add_argument('--precision', choices = sorted(PRECISIONS), default = 'double')
	parser.add_argument('--seed', type = int, default = None, help = 'seed for the random engine')
	parser.add_argument('--target', choices = sorted(TARGETS), default = 'symmetric', help = 'inverse CDF of the input distribution')
	parser.add_argument('-k', type = float, default = -1., help = 'shape parameter of the cubic target')
	parser.add_argument('--output-dir', default = None, help = 'output directory, defaults to $PDFSAMPLER_OUTPUT')
	parser.add_argument('--progress', action = 'store_true', help = 'show a progress bar')
	parser.add_argument('--verbose', action = 'store_true', help = 'debug logging')
	return parser


def run_modes(args):
	'''
	Runs every deposit mode requested on the command line, returns the list of files written
	'''
	function = TARGETS[args.target]
	if args.target == 'cubic':
		function = functools.partial(function, k = args.k)

	modes = MODES[args.deposit_all]
	seeds = np.random.SeedSequence(args.seed).spawn(len(modes))

	files = []
	for deposit_all, seed in zip(modes, seeds):
		pdf = run(function, args.n_bins, args.n_sum, deposit_all, args.n_iter, args.precision, seed, args.progress)
		filename = output_filename(deposit_all, args.output_dir)
		write_pdf(pdf, filename)
		logger.info("Wrote %s", filename)
		files.append(filename)
	return files


def main(argv = None):
	args = build_parser().parse_args(argv)
	logging.basicConfig(level = logging.DEBUG if args.verbose else logging.INFO,
						format = '%(asctime)s %(name)s %(levelname)s: %(message)s')
	run_modes(args)
	return 0


if __name__ == '__main__':
	raise SystemExit(main())
