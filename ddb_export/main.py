import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from .errors import MissingTableNameError
from .exporter import export_to_csv
from .fetcher import fetch_table
from .params import get_input_params

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv=None) -> int:
    """パラメータ取得 → テーブル全件スキャン → CSV 出力"""
    try:
        params = get_input_params(argv)
    except MissingTableNameError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(str(e))
        return 1

    logging.basicConfig(level=logging.DEBUG if params.debug else logging.INFO, format=LOG_FORMAT)

    try:
        logger.info(f"Fetching data from DynamoDB table: {params.table_name} in region: {params.region}...")
        data = fetch_table(
            params.region,
            params.table_name,
            endpoint_url=params.endpoint_url,
            consistent_read=params.consistent_read,
        )
    except (ClientError, BotoCoreError):
        logger.exception("Error exporting data")
        return 1

    logger.info(f"Found {len(data)} items. Exporting to CSV...")
    # 書き込み失敗は export_to_csv 内でログ済み。終了コードには反映しない
    export_to_csv(data, params.output_file)
    return 0


def run():
    sys.exit(main())
