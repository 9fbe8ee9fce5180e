import unittest
from datetime import date

from app.models.employee import Employee
from app.schemas.employees import EmployeeCreate
from app.services.employee_store import create_employee, load_employee_records, seed_employees
from tests.api_base import EmployeeApiBase


class EmployeeStoreTests(EmployeeApiBase):
    seed = False

    def test_seed_only_fills_empty_table(self):
        with self.SessionLocal() as db:
            self.assertEqual(seed_employees(db), 3)
            self.assertEqual(seed_employees(db), 0)
            self.assertEqual(db.query(Employee).count(), 3)

    def test_records_are_read_only_snapshots(self):
        with self.SessionLocal() as db:
            seed_employees(db)
            records = load_employee_records(db)
        self.assertIsInstance(records, tuple)
        self.assertEqual([r["id"] for r in records], ["1", "2", "3"])
        self.assertEqual(records[0]["hireDate"], date(2022, 1, 15))
        with self.assertRaises(TypeError):
            records[0]["name"] = "Changed"

    def test_create_generates_id(self):
        payload = EmployeeCreate(name=" Grace ", department="Engineering", position="Dev", hireDate="2020-02-02", salary=10)
        with self.SessionLocal() as db:
            with self.assertLogs("app.employees", level="INFO"):
                row = create_employee(db, payload)
            self.assertEqual(row.name, "Grace")
            self.assertEqual(len(row.id), 32)
            self.assertEqual(len(load_employee_records(db)), 1)


if __name__ == "__main__":
    unittest.main()
