from unittest import TestCase
import random

from country_currency.mapper import UNKNOWN_NAME, draw_multiplier, map_country


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class MapCountryTestCase(TestCase):

    def setUp(self):
        self.country = {
            "name": {"common": "Testland"},
            "capital": ["Test City"],
            "region": "Africa",
            "population": 1000,
            "currencies": {"USD": {}},
            "flags": {"png": "https://flags.test/testland.png", "svg": "https://flags.test/testland.svg"},
        }

    def test_maps_full_record(self):
        record = map_country(self.country, {"USD": 2.0}, rng=random.Random(7))
        self.assertEqual(record["name"], "Testland")
        self.assertEqual(record["capital"], "Test City")
        self.assertEqual(record["region"], "Africa")
        self.assertEqual(record["population"], 1000)
        self.assertEqual(record["currency_code"], "USD")
        self.assertEqual(record["exchange_rate"], 2.0)
        self.assertEqual(record["flag_url"], "https://flags.test/testland.png")
        self.assertGreaterEqual(record["estimated_gdp"], 500000)
        self.assertLess(record["estimated_gdp"], 1000000)

    def test_gdp_uses_multiplier(self):
        record = map_country(self.country, {"USD": 2.0}, rng=FixedRandom(0.5))
        self.assertAlmostEqual(record["estimated_gdp"], 1000 * 1500 / 2.0)

    def test_unmatched_currency_has_no_rate_or_gdp(self):
        record = map_country(self.country, {"EUR": 0.9})
        self.assertEqual(record["currency_code"], "USD")
        self.assertIsNone(record["exchange_rate"])
        self.assertIsNone(record["estimated_gdp"])

    def test_empty_currencies(self):
        self.country["currencies"] = {}
        record = map_country(self.country, {"USD": 2.0})
        self.assertIsNone(record["currency_code"])
        self.assertIsNone(record["exchange_rate"])
        self.assertIsNone(record["estimated_gdp"])

    def test_zero_rate_treated_as_missing(self):
        record = map_country(self.country, {"USD": 0})
        self.assertIsNone(record["exchange_rate"])
        self.assertIsNone(record["estimated_gdp"])

    def test_missing_population_defaults_to_zero_without_gdp(self):
        del self.country["population"]
        record = map_country(self.country, {"USD": 2.0})
        self.assertEqual(record["population"], 0)
        self.assertIsNone(record["estimated_gdp"])

    def test_empty_payload_does_not_raise(self):
        record = map_country({}, {})
        self.assertEqual(record, {
            "name": UNKNOWN_NAME,
            "capital": None,
            "region": None,
            "population": 0,
            "currency_code": None,
            "exchange_rate": None,
            "estimated_gdp": None,
            "flag_url": None,
        })

    def test_empty_capital_list_and_svg_only_flag(self):
        self.country["capital"] = []
        self.country["flags"] = {"svg": "https://flags.test/testland.svg"}
        record = map_country(self.country, {})
        self.assertIsNone(record["capital"])
        self.assertEqual(record["flag_url"], "https://flags.test/testland.svg")

    def test_v2_payload_shape(self):
        country = {
            "name": "Oldland",
            "capital": "Old Town",
            "region": "Europe",
            "population": 10,
            "currencies": [{"code": "EUR", "name": "Euro"}],
            "flag": "https://flags.test/oldland.svg",
        }
        record = map_country(country, {"EUR": 0.5}, rng=FixedRandom(0.0))
        self.assertEqual(record["name"], "Oldland")
        self.assertEqual(record["capital"], "Old Town")
        self.assertEqual(record["currency_code"], "EUR")
        self.assertEqual(record["flag_url"], "https://flags.test/oldland.svg")
        self.assertAlmostEqual(record["estimated_gdp"], 10 * 1000 / 0.5)

    def test_negative_population_clamped(self):
        self.country["population"] = -5
        record = map_country(self.country, {"USD": 1.0})
        self.assertEqual(record["population"], 0)
        self.assertEqual(record["estimated_gdp"], 0)


class DrawMultiplierTestCase(TestCase):

    def test_bounds(self):
        self.assertEqual(draw_multiplier(FixedRandom(0.0)), 1000)
        self.assertLess(draw_multiplier(FixedRandom(0.9999999)), 2000)

    def test_independent_draws(self):
        rng = random.Random(3)
        draws = {draw_multiplier(rng) for _ in range(20)}
        self.assertGreater(len(draws), 1)
        for value in draws:
            self.assertTrue(1000 <= value < 2000)
