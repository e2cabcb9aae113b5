import json
import logging
import unittest

from app.core.logging import JsonFormatter


class JsonFormatterTest(unittest.TestCase):
    def test_includes_ledger_fields(self):
        record = logging.LogRecord(
            name="app.services.ledger_service",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Purchase %s delivered.",
            args=(3,),
            exc_info=None,
        )
        record.purchase_id = 3
        record.in_stock = 12

        payload = json.loads(JsonFormatter().format(record))

        self.assertEqual(payload["message"], "Purchase 3 delivered.")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["purchase_id"], 3)
        self.assertEqual(payload["in_stock"], 12)
        self.assertNotIn("sale_id", payload)


if __name__ == "__main__":
    unittest.main()
