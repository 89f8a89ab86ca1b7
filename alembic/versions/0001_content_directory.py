from alembic import op
import sqlalchemy as sa

revision = "0001_content_directory"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "departments",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("intro", sa.Text(), nullable=True),
        sa.Column("hero_url", sa.String(length=500), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("slug", name="uq_department_slug"),
    )

    op.create_table(
        "cities",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("department_id", sa.String(), sa.ForeignKey("departments.id"), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("hero_url", sa.String(length=500), nullable=True),
        sa.Column("lat", sa.Float(), nullable=True),
        sa.Column("lng", sa.Float(), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("department_id", "slug", name="uq_city_slug_per_department"),
    )
    op.create_index("ix_cities_department_id", "cities", ["department_id"])

    op.create_table(
        "places",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("city_id", sa.String(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("kind", sa.String(length=30), nullable=False),
        sa.Column("slug", sa.String(length=160), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.Column("phone", sa.String(length=60), nullable=True),
        sa.Column("website", sa.String(length=500), nullable=True),
        sa.Column("booking_url", sa.String(length=500), nullable=True),
        sa.Column("menu_url", sa.String(length=500), nullable=True),
        sa.Column("price_range", sa.String(length=4), nullable=True),
        sa.Column("opening_hours", sa.String(length=300), nullable=True),
        sa.Column("gps_coordinates", sa.String(length=80), nullable=True),
        sa.Column("cover_url", sa.String(length=500), nullable=True),
        sa.Column("entrance_fee", sa.String(length=120), nullable=True),
        sa.Column("best_visiting_time", sa.String(length=200), nullable=True),
        sa.Column("historical_significance", sa.Text(), nullable=True),
        sa.Column("accessibility", sa.Text(), nullable=True),
        sa.Column("guided_tours", sa.Text(), nullable=True),
        sa.Column("parking_info", sa.Text(), nullable=True),
        sa.Column("directions_text", sa.Text(), nullable=True),
        sa.Column("unesco_site", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("event_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("city_id", "slug", name="uq_place_slug_per_city"),
        sa.CheckConstraint(
            "kind IN ('restaurant','hotel','landmark','beach','shop','event','tour','activity')",
            name="ck_place_kind",
        ),
    )
    op.create_index("ix_places_city_id", "places", ["city_id"])

    op.create_table(
        "figures",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("city_id", sa.String(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("slug", sa.String(length=160), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("full_name", sa.String(length=300), nullable=True),
        sa.Column("category", sa.String(length=120), nullable=True),
        sa.Column("occupation", sa.String(length=200), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("birth_year", sa.Integer(), nullable=True),
        sa.Column("death_year", sa.Integer(), nullable=True),
        sa.Column("birth_place", sa.String(length=300), nullable=True),
        sa.Column("death_place", sa.String(length=300), nullable=True),
        sa.Column("legacy", sa.Text(), nullable=True),
        sa.Column("famous_works", sa.Text(), nullable=True),
        sa.Column("contemporaries", sa.Text(), nullable=True),
        sa.Column("movements", sa.Text(), nullable=True),
        sa.Column("quotes", sa.Text(), nullable=True),
        sa.Column("achievements", sa.Text(), nullable=True),
        sa.Column("monuments", sa.Text(), nullable=True),
        sa.Column("lived_addresses", sa.Text(), nullable=True),
        sa.Column("portrait_url", sa.String(length=500), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("city_id", "slug", name="uq_figure_slug_per_city"),
    )
    op.create_index("ix_figures_city_id", "figures", ["city_id"])

    op.create_table(
        "media",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("place_id", sa.String(), sa.ForeignKey("places.id"), nullable=False),
        sa.Column("path", sa.String(length=500), nullable=False),
        sa.Column("alt", sa.String(length=300), nullable=True),
        sa.Column("bucket", sa.String(length=80), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_media_place_id", "media", ["place_id"])

    op.create_table(
        "business_plans",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("code", sa.String(length=40), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("price_month_cents", sa.Integer(), nullable=False),
        sa.Column("features", sa.JSON(), nullable=False),
        sa.UniqueConstraint("code", name="uq_business_plan_code"),
    )

    op.create_table(
        "api_keys",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("owner_email", sa.String(length=320), nullable=False),
        sa.Column("key_prefix", sa.String(length=16), nullable=False),
        sa.Column("key_hash", sa.Text(), nullable=False, unique=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_api_keys_key_prefix", "api_keys", ["key_prefix"])

def downgrade():
    op.drop_index("ix_api_keys_key_prefix", table_name="api_keys")
    op.drop_table("api_keys")
    op.drop_table("business_plans")
    op.drop_index("ix_media_place_id", table_name="media")
    op.drop_table("media")
    op.drop_index("ix_figures_city_id", table_name="figures")
    op.drop_table("figures")
    op.drop_index("ix_places_city_id", table_name="places")
    op.drop_table("places")
    op.drop_index("ix_cities_department_id", table_name="cities")
    op.drop_table("cities")
    op.drop_table("departments")
