from src.looply.looply.database.bootstrap import SCHEMA_PATH, iter_sql_statements


def test_splitter_handles_quotes_and_comments():
    sql = """
    -- comment; with semicolon
    CREATE TABLE a (x VARCHAR(5) DEFAULT 'a;b');
    INSERT INTO a VALUES ("c;d");
    SELECT 1
    """
    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x VARCHAR(5) DEFAULT 'a;b')",
        'INSERT INTO a VALUES ("c;d")',
        "SELECT 1",
    ]


def test_bundled_schema_creates_kv_table():
    statements = list(iter_sql_statements(SCHEMA_PATH.read_text(encoding="utf-8")))
    assert any("CREATE TABLE IF NOT EXISTS kv_store" in s for s in statements)


def test_bundled_schema_compares_keys_byte_for_byte():
    statements = list(iter_sql_statements(SCHEMA_PATH.read_text(encoding="utf-8")))
    table = next(s for s in statements if "CREATE TABLE IF NOT EXISTS kv_store" in s)
    assert "k VARCHAR(191) CHARACTER SET utf8mb4 COLLATE utf8mb4_bin NOT NULL" in table
