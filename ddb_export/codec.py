import base64
from decimal import Decimal

import simplejson
from boto3.dynamodb.types import Binary, TypeDeserializer

_deserializer = TypeDeserializer()


def to_record(item):
    """
    DynamoDB の型付きアイテム ({"id": {"S": "1"}, ...}) を
    CSV に書き出せるフラットな dict に変換する。キーの順序は維持する。
    """
    return {key: flatten_value(_deserializer.deserialize(value)) for key, value in item.items()}


def flatten_value(value):
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, Decimal):
        return _number(value)
    if isinstance(value, Binary):
        return _b64(value.value)
    # SS / NS / BS / L / M は JSON 文字列にする。小数は Decimal のまま桁を落とさず出力
    return simplejson.dumps(_plain(value), use_decimal=True, ensure_ascii=False, separators=(",", ":"))


def _plain(value):
    if isinstance(value, Decimal):
        return _number(value)
    if isinstance(value, Binary):
        return _b64(value.value)
    if isinstance(value, set):
        return sorted(_plain(v) for v in value)
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def _number(value: Decimal):
    # 整数なら int、小数は Decimal のまま
    return int(value) if value == value.to_integral_value() else value


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")
