from __future__ import annotations

import mysql.connector

from ojt_dtr.database.connection import DatabaseConnection, DBConfig


def test_from_dict_keeps_defaults_for_missing_keys():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307", "password": None})
    assert cfg == DBConfig(host="db", port=3307, user="root", password="", database="ojt_dtr")


def test_connect_without_database_for_bootstrap(monkeypatch):
    calls = []
    monkeypatch.setattr(mysql.connector, "connect", lambda **kwargs: calls.append(kwargs))

    conn = DatabaseConnection(DBConfig(database="dtr_test"))
    conn.connect(with_database=False)
    conn.connect()

    assert "database" not in calls[0]
    assert calls[1]["database"] == "dtr_test"
    assert calls[1]["port"] == 3306
