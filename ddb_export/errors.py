class ExportError(Exception):
    """ddb-export 固有のエラーの基底クラス"""


class MissingTableNameError(ExportError, ValueError):
    def __init__(self):
        super().__init__("Error: You must provide the table name with --tableName")
