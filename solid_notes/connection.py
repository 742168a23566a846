#
# Dependency inversion на примере подключения к базе.

#   PasswordReminder не создаёт подключение сам и не знает, какая за ним база:
#   ему передают любой объект с методом connect(). Высокоуровневый модуль зависит
#   от абстракции DBConnectionInterface, а не от sqlite3.

import logging
import sqlite3
from abc import ABC, abstractmethod

from . import app


class DBConnectionInterface(ABC):
    @abstractmethod
    def connect(self):
        """Возвращает открытое подключение (объект с execute() и close())."""


class SQLiteConnection(DBConnectionInterface):
    def __init__(self, path=None):
        self.path = app.DB_PATH if path is None else path

    def connect(self):
        logging.debug(f"Подключение к SQLite: {self.path}")
        return sqlite3.connect(self.path)


class PasswordReminder:
    def __init__(self, db_connection):
        if not isinstance(db_connection, DBConnectionInterface):
            raise TypeError(f"Нужна реализация DBConnectionInterface, получено {type(db_connection).__name__}")
        self.db_connection = db_connection

    def check(self):
        """Открывает подключение, проверяет его простым запросом и закрывает."""
        conn = None
        try:
            conn = self.db_connection.connect()
            conn.execute("SELECT 1")
        except sqlite3.Error as e:
            logging.error(f"Подключение {type(self.db_connection).__name__} не работает: {e}")
            return False
        finally:
            if conn is not None:
                conn.close()
        logging.info(f"Подключение {type(self.db_connection).__name__} работает.")
        return True
