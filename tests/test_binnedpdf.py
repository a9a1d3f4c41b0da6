"""Tests for :mod:`pdfsampler.sampling.binnedpdf`."""

import unittest

import numpy as np
from parameterized import parameterized

from pdfsampler.sampling.binnedpdf import BinnedPDF
from pdfsampler.sampling.exceptions import DomainError, EmptyHistogramError
from pdfsampler.sampling.interpolant import PiecewiseLinearFunction

N_BINS = 8


def center(n, n_bins=N_BINS):
	return (float(n) + 0.5) / float(n_bins)


class TestBinnedPDF(unittest.TestCase):
	"""Tests for :class:`BinnedPDF`."""

	def setUp(self):
		self.pdf = BinnedPDF(N_BINS)

	def test_one_per_bin(self):
		"""One deposit at each bin center puts one count in every bin."""
		self.assertEqual(self.pdf.count(), 0)
		for n in range(N_BINS):
			self.pdf.deposit(center(n))
		self.assertEqual(self.pdf.count(), N_BINS)
		for value in self.pdf.get_all_bins():
			self.assertEqual(value, 1)

	def test_triangular(self):
		"""n deposits in bin n."""
		self.pdf.deposit(0.3)
		self.pdf.clear()
		self.assertEqual(self.pdf.count(), 0)
		for n in range(N_BINS):
			for _ in range(n):
				self.pdf.deposit(center(n))
		self.assertEqual(self.pdf.count(), N_BINS * (N_BINS - 1) // 2)
		for n in range(N_BINS):
			self.assertEqual(self.pdf.get_bin(n), n)

	def test_deposit_many_matches_deposit(self):
		values = np.random.default_rng(3).uniform(size=1000)
		other = BinnedPDF(N_BINS)
		for x in values:
			other.deposit(x)
		self.pdf.deposit_many(values)
		self.assertEqual(self.pdf.count(), 1000)
		np.testing.assert_array_equal(self.pdf.get_all_bins(), other.get_all_bins())
		np.testing.assert_array_equal(
			self.pdf.get_all_bins(), np.histogram(values, bins=N_BINS, range=(0, 1))[0]
		)

	def test_single_precision_values(self):
		values = np.array([0.01, 0.5, np.nextafter(np.float32(1), np.float32(0))], dtype=np.float32)
		self.pdf.deposit_many(values)
		np.testing.assert_array_equal(self.pdf.get_all_bins(), [1, 0, 0, 0, 1, 0, 0, 1])

	def test_empty_pdf(self):
		"""Normalizing an empty histogram fails instead of returning NaN."""
		with self.assertRaises(EmptyHistogramError):
			self.pdf.get_pdf()
		with self.assertRaises(ZeroDivisionError):
			self.pdf.get_pdf()

	def test_pdf(self):
		self.pdf.deposit_many([0.05, 0.06, 0.5, 0.99])
		np.testing.assert_allclose(self.pdf.get_pdf(), [0.5, 0, 0, 0, 0.25, 0, 0, 0.25])
		self.assertAlmostEqual(self.pdf.get_pdf().sum(), 1.)

	def test_pdf_single_precision(self):
		pdf = BinnedPDF(N_BINS, precision='single')
		pdf.deposit(0.2)
		self.assertEqual(pdf.get_pdf().dtype, np.float32)
		self.assertEqual(pdf.get_bin_centers().dtype, np.float32)

	@parameterized.expand([(1.,), (-1e-12,), (2.,), (np.nan,)])
	def test_deposit_domain(self, x):
		"""Only values in [0,1) can be deposited."""
		with self.assertRaises(DomainError):
			self.pdf.deposit(x)
		self.assertEqual(self.pdf.count(), 0)

	def test_deposit_many_is_all_or_nothing(self):
		with self.assertRaises(DomainError) as context:
			self.pdf.deposit_many([0.1, 0.2, 1.0, 0.3])
		np.testing.assert_array_equal(context.exception.value, [1.0])
		self.assertEqual(self.pdf.count(), 0)
		np.testing.assert_array_equal(self.pdf.get_all_bins(), 0)

	def test_below_one(self):
		"""The largest value below one goes to the last bin."""
		self.pdf.deposit(np.nextafter(1., 0.))
		self.assertEqual(self.pdf.get_bin(N_BINS - 1), 1)

	def test_lower_edges(self):
		"""Bins are closed on the left."""
		for edge in self.pdf.get_bin_edges()[:-1]:
			self.pdf.deposit(edge)
		np.testing.assert_array_equal(self.pdf.get_all_bins(), 1)

	@parameterized.expand([(-1,), (N_BINS,)])
	def test_get_bin_range(self, index):
		with self.assertRaises(IndexError):
			self.pdf.get_bin(index)

	def test_get_all_bins_is_copy(self):
		bins = self.pdf.get_all_bins()
		bins[0] = 5
		self.assertEqual(self.pdf.get_bin(0), 0)

	def test_layout_matches_interpolant(self):
		"""Edges and centers are the same as those of an interpolant with as many bins."""
		func = PiecewiseLinearFunction([], N_BINS)
		np.testing.assert_array_equal(self.pdf.get_bin_edges(), func.get_bin_edges())
		np.testing.assert_array_equal(self.pdf.get_bin_centers(), func.get_bin_centers())
		self.assertEqual(len(self.pdf.get_bin_edges()), N_BINS + 1)
		self.assertEqual(len(self.pdf), N_BINS)

	def test_merge(self):
		"""Merging adds the counters elementwise, in any order."""
		other = BinnedPDF(N_BINS)
		self.pdf.deposit_many([0.1, 0.2])
		other.deposit_many([0.1, 0.9, 0.95])
		expected = self.pdf.get_all_bins() + other.get_all_bins()
		self.pdf.merge(other)
		self.assertEqual(self.pdf.count(), 5)
		np.testing.assert_array_equal(self.pdf.get_all_bins(), expected)
		self.assertEqual(self.pdf.count(), sum(self.pdf.get_all_bins()))

	def test_merge_mismatch(self):
		with self.assertRaises(ValueError):
			self.pdf.merge(BinnedPDF(N_BINS + 1))

	@parameterized.expand([(0,), (1.5,)])
	def test_invalid_bins(self, n_bins):
		with self.assertRaises(ValueError):
			BinnedPDF(n_bins)

	def test_invalid_precision(self):
		with self.assertRaisesRegex(ValueError, "Precision"):
			BinnedPDF(N_BINS, precision='half')
