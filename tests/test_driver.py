"""Tests for :mod:`pdfsampler.run.driver`."""

import os
import tempfile
import unittest

import astropy.table as tb
import numpy as np
from parameterized import parameterized

from pdfsampler.run.driver import build_parser, main, run, run_modes
from pdfsampler.run.targets import identity, symmetric


class TestRun(unittest.TestCase):
	"""Tests for :func:`run`."""

	def test_identity(self):
		pdf = run(identity, 4, n_iter=20000, seed=0)
		self.assertEqual(pdf.count(), 20000)
		np.testing.assert_allclose(pdf.get_pdf(), 0.25, atol=0.02)

	def test_symmetric(self):
		"""The symmetric inverse CDF gives a PDF symmetric about 1/2."""
		pdf = run(symmetric, 8, n_iter=100000, seed=1)
		densities = pdf.get_pdf()
		np.testing.assert_allclose(densities, densities[::-1], atol=0.01)
		# flat inverse CDF at the center means a peak in the density there
		self.assertGreater(densities[3], densities[0])


class TestMain(unittest.TestCase):
	"""Tests for :func:`main`."""

	def setUp(self):
		self.tempdir = tempfile.TemporaryDirectory()

	def tearDown(self):
		self.tempdir.cleanup()

	def test_defaults(self):
		args = build_parser().parse_args([])
		self.assertEqual(args.n_bins, 8)
		self.assertEqual(args.n_sum, 1)
		self.assertEqual(args.deposit_all, "both")
		self.assertEqual(args.target, "symmetric")
		self.assertEqual(args.precision, "double")

	@parameterized.expand([
		("both", ["pdf_true.txt", "pdf_false.txt"]),
		("true", ["pdf_true.txt"]),
		("false", ["pdf_false.txt"]),
	])
	def test_modes(self, mode, names):
		"""Each deposit mode writes its own table."""
		args = build_parser().parse_args([
			"--n-bins", "8", "--n-sum", "3", "--n-iter", "3000", "--seed", "5",
			"--deposit-all", mode, "--output-dir", self.tempdir.name,
		])
		files = run_modes(args)
		self.assertEqual(files, [os.path.join(self.tempdir.name, name) for name in names])
		for filename in files:
			table = tb.Table.read(filename, format="ascii.basic")
			self.assertEqual(len(table), 8)
			self.assertAlmostEqual(np.sum(table["PDF"]), 1., places=4)

	def test_main(self):
		status = main([
			"--n-bins", "6", "--n-iter", "1000", "--target", "cubic", "-k", "0.5",
			"--precision", "single", "--output-dir", self.tempdir.name,
		])
		self.assertEqual(status, 0)
		self.assertTrue(os.path.exists(os.path.join(self.tempdir.name, "pdf_true.txt")))
		self.assertTrue(os.path.exists(os.path.join(self.tempdir.name, "pdf_false.txt")))

	def test_invalid_target(self):
		with self.assertRaises(SystemExit):
			build_parser().parse_args(["--target", "gaussian"])
