from django.db import migrations, models

TOTALS_VIEW = """
CREATE VIEW v_affiliate_totals AS
SELECT
    l.id AS link_id,
    l.affiliate_id AS affiliate_id,
    (SELECT COUNT(*) FROM clicks c WHERE c.link_id = l.id) AS clicks,
    (SELECT COUNT(*) FROM conversions v WHERE v.link_id = l.id) AS conversions,
    (
        SELECT CAST(COALESCE(SUM(v.revenue_cents), 0) AS BIGINT)
        FROM conversions v
        WHERE v.link_id = l.id
    ) AS revenue_cents
FROM links l
"""

DAILY_VIEW = """
CREATE VIEW v_affiliate_stats_daily AS
SELECT
    CAST(e.affiliate_id AS TEXT) || ':' || CAST(e.day AS TEXT) AS id,
    e.affiliate_id AS affiliate_id,
    e.day AS day,
    CAST(SUM(e.clicks) AS BIGINT) AS clicks,
    CAST(SUM(e.conversions) AS BIGINT) AS conversions,
    CAST(SUM(e.revenue_cents) AS BIGINT) AS revenue_cents
FROM (
    SELECT l.affiliate_id AS affiliate_id, {click_day} AS day,
           1 AS clicks, 0 AS conversions, 0 AS revenue_cents
    FROM clicks c JOIN links l ON l.id = c.link_id
    UNION ALL
    SELECT l.affiliate_id, {conversion_day}, 0, 1, v.revenue_cents
    FROM conversions v JOIN links l ON l.id = v.link_id
) e
GROUP BY e.affiliate_id, e.day
"""

# Days are bucketed in UTC.
DAY_EXPRESSIONS = {
    "postgresql": "CAST(({column} AT TIME ZONE 'UTC') AS DATE)",
    "sqlite": "date({column})",
}


def create_views(apps, schema_editor):
    vendor = schema_editor.connection.vendor
    if vendor not in DAY_EXPRESSIONS:
        raise NotImplementedError(f"Stats views are not defined for {vendor}")
    day = DAY_EXPRESSIONS[vendor]
    schema_editor.execute(TOTALS_VIEW)
    schema_editor.execute(
        DAILY_VIEW.format(
            click_day=day.format(column="c.clicked_at"),
            conversion_day=day.format(column="v.created_at"),
        )
    )


def drop_views(apps, schema_editor):
    schema_editor.execute("DROP VIEW IF EXISTS v_affiliate_stats_daily")
    schema_editor.execute("DROP VIEW IF EXISTS v_affiliate_totals")


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("affiliates", "0001_initial"),
        ("tracking", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AffiliateLinkTotals",
            fields=[
                ("link_id", models.UUIDField(primary_key=True, serialize=False)),
                ("affiliate_id", models.UUIDField()),
                ("clicks", models.BigIntegerField()),
                ("conversions", models.BigIntegerField()),
                ("revenue_cents", models.BigIntegerField()),
            ],
            options={
                "db_table": "v_affiliate_totals",
                "managed": False,
            },
        ),
        migrations.CreateModel(
            name="AffiliateDailyStats",
            fields=[
                ("id", models.CharField(max_length=100, primary_key=True, serialize=False)),
                ("affiliate_id", models.UUIDField()),
                ("day", models.DateField()),
                ("clicks", models.BigIntegerField()),
                ("conversions", models.BigIntegerField()),
                ("revenue_cents", models.BigIntegerField()),
            ],
            options={
                "db_table": "v_affiliate_stats_daily",
                "managed": False,
                "ordering": ["day"],
            },
        ),
        migrations.RunPython(create_views, drop_views),
    ]
