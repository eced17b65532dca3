from unittest import TestCase, mock
from sqlalchemy.exc import OperationalError

from country_currency import setup_db
from fakes import make_settings


class SetupDatabaseTestCase(TestCase):

    def test_creates_countries_table(self):
        self.assertEqual(setup_db.setup_database(make_settings()), ["countries"])

    @mock.patch("country_currency.setup_db.setup_database")
    @mock.patch("country_currency.setup_db.Settings")
    def test_main_exits_non_zero_on_database_error(self, mock_settings, mock_setup):
        mock_settings.from_env.return_value = make_settings()
        mock_setup.side_effect = OperationalError("CREATE TABLE", {}, Exception("refused"))
        with self.assertRaises(SystemExit) as ctx:
            setup_db.main()
        self.assertEqual(ctx.exception.code, 1)
