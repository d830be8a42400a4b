import logging
from typing import Any, Dict, List, Optional

import boto3

from .codec import to_record

logger = logging.getLogger(__name__)


def fetch_table(
    region: str,
    table_name: str,
    endpoint_url: Optional[str] = None,
    consistent_read: bool = False,
) -> List[Dict[str, Any]]:
    """
    テーブル全体をスキャンし、ページネーションに対応してすべてのアイテムを取得する。
    スキャンのエラーはそのまま呼び出し元に送出する (リトライはしない)。
    """
    client = boto3.client("dynamodb", region_name=region, endpoint_url=endpoint_url)

    items = []
    last_evaluated_key = None
    page = 0
    try:
        while True:
            params = {"TableName": table_name}
            if last_evaluated_key:
                params["ExclusiveStartKey"] = last_evaluated_key
            if consistent_read:
                params["ConsistentRead"] = True

            response = client.scan(**params)
            page += 1

            page_items = response.get("Items", [])
            items.extend(to_record(item) for item in page_items)
            logger.debug(f"Page {page}: {len(page_items)} items from {table_name}")

            # LastEvaluatedKey が無ければ最終ページ
            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                break
    finally:
        client.close()

    logger.info(f"Scanned {len(items)} items from {table_name} in {page} page(s)")
    return items
