import argparse
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingTableNameError

DEFAULT_REGION = "eu-west-1"
DEFAULT_OUTPUT_FILE = "output.csv"


class ExportParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    region: str = DEFAULT_REGION
    table_name: str = Field(alias="tableName", min_length=1)
    output_file: str = Field(default=DEFAULT_OUTPUT_FILE, alias="outputFile", min_length=1)
    endpoint_url: Optional[str] = Field(default=None, alias="endpointUrl")
    consistent_read: bool = Field(default=False, alias="consistentRead")
    debug: bool = False


def build_parser():
    p = argparse.ArgumentParser(
        prog="ddb-export", description="Export a DynamoDB table to CSV", allow_abbrev=False
    )
    p.add_argument("--region", default=DEFAULT_REGION)
    # 必須だが argparse の required は使わず、固定メッセージでエラーにする
    p.add_argument("--tableName")
    p.add_argument("--outputFile", default=DEFAULT_OUTPUT_FILE)
    p.add_argument("--endpointUrl", help="e.g. http://localhost:8000 for DynamoDB Local")
    p.add_argument("--consistentRead", action="store_true", help="Use ConsistentRead=True on scan")
    p.add_argument("--debug", action="store_true", help="print debugging info")
    return p


def get_input_params(argv=None) -> ExportParams:
    args = build_parser().parse_args(argv)

    if not args.tableName:
        raise MissingTableNameError()

    return ExportParams(**vars(args))
