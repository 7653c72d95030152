from dataclasses import dataclass

from constructs import Construct


@dataclass(frozen=True)
class IotSqlConfig:
    """Rendered filter for a topic rule."""

    sql: str
    aws_iot_sql_version: str


class IotSql:
    """
    IoT SQL statement plus the rules engine version it is written for.

    See https://docs.aws.amazon.com/iot/latest/developerguide/iot-sql-reference.html
    """

    VERSION_2015_10_08 = "2015-10-08"
    VERSION_2016_03_23 = "2016-03-23"
    VERSION_NEWEST = "beta"

    def __init__(self, sql: str, version: str):
        self._sql = sql
        self._version = version

    @classmethod
    def from_string_as_ver_2015_10_08(cls, sql: str) -> "IotSql":
        return cls(sql, cls.VERSION_2015_10_08)

    @classmethod
    def from_string_as_ver_2016_03_23(cls, sql: str) -> "IotSql":
        return cls(sql, cls.VERSION_2016_03_23)

    @classmethod
    def from_string_as_ver_newest(cls, sql: str) -> "IotSql":
        # "beta" tracks the latest engine version, behaviour may change
        return cls(sql, cls.VERSION_NEWEST)

    def bind(self, scope: Construct) -> IotSqlConfig:
        return IotSqlConfig(sql=self._sql, aws_iot_sql_version=self._version)
