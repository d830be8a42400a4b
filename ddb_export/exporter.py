import csv
import logging

logger = logging.getLogger(__name__)


def export_to_csv(records, output_file) -> bool:
    """
    レコードを CSV に書き出す。ヘッダーは先頭レコードのキー順。
    書き込みエラーはログに残すだけで送出しない。
    """
    if not records:
        logger.info("No data found in the DynamoDB table.")
        return False

    headers = list(records[0].keys())

    try:
        with open(output_file, mode="w", newline="", encoding="utf-8") as csv_file:
            # ヘッダーに無いキーは捨て、足りないキーは空欄
            writer = csv.DictWriter(csv_file, fieldnames=headers, restval="", extrasaction="ignore")
            writer.writeheader()
            for record in records:
                writer.writerow(record)
    except (OSError, csv.Error) as e:
        logger.error(f"Error writing CSV file: {e}")
        return False

    logger.info(f"Data successfully exported to '{output_file}'")
    return True
