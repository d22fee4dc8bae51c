"""create users, dealers, employees, customers and audit_logs tables"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_registry_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("role", sa.String(), nullable=False, server_default="dealer"),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("temp_pass", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "dealers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE", name="fk_dealers_user_id_users"),
            nullable=False,
        ),
        sa.Column("company_name", sa.String(), nullable=False),
        sa.Column("primary_contact_name", sa.String(), nullable=False),
        sa.Column("primary_contact_phone", sa.String(), nullable=False),
        sa.Column("primary_contact_email", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", name="uq_dealers_user_id"),
    )
    op.create_index("ix_dealers_company_name", "dealers", ["company_name"], unique=True)

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "dealer_id",
            sa.Integer(),
            sa.ForeignKey("dealers.id", ondelete="CASCADE", name="fk_employees_dealer_id_dealers"),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("aadhar", sa.String(), nullable=False),
        sa.Column("position", sa.String(), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("termination_date", sa.Date(), nullable=True),
        sa.Column("termination_reason", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_employees_dealer_id", "employees", ["dealer_id"])
    op.create_index("ix_employees_aadhar", "employees", ["aadhar"], unique=True)
    op.create_index("ix_employees_status", "employees", ["status"])
    op.create_index("ix_emp_dealer_name", "employees", ["dealer_id", "last_name", "first_name"])

    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "dealer_id",
            sa.Integer(),
            sa.ForeignKey("dealers.id", ondelete="CASCADE", name="fk_customers_dealer_id_dealers"),
            nullable=False,
        ),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("name_or_entity", sa.String(), nullable=False),
        sa.Column("contact_person", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("official_id", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_customers_dealer_id", "customers", ["dealer_id"])
    op.create_index("ix_customers_name_or_entity", "customers", ["name_or_entity"])

    # No foreign keys: audit entries outlive the users and dealers they mention.
    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("who_user_id", sa.Integer(), nullable=False),
        sa.Column("who_user_name", sa.String(), nullable=False),
        sa.Column("dealer_id", sa.Integer(), nullable=True),
        sa.Column("action_type", sa.String(), nullable=False),
        sa.Column("details", sa.Text(), nullable=False, server_default=""),
        sa.Column("timestamp", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_audit_logs_who_user_id", "audit_logs", ["who_user_id"])
    op.create_index("ix_audit_dealer_timestamp", "audit_logs", ["dealer_id", "timestamp"])


def downgrade() -> None:
    op.drop_index("ix_audit_dealer_timestamp", table_name="audit_logs")
    op.drop_index("ix_audit_logs_who_user_id", table_name="audit_logs")
    op.drop_table("audit_logs")
    op.drop_index("ix_customers_name_or_entity", table_name="customers")
    op.drop_index("ix_customers_dealer_id", table_name="customers")
    op.drop_table("customers")
    op.drop_index("ix_emp_dealer_name", table_name="employees")
    op.drop_index("ix_employees_status", table_name="employees")
    op.drop_index("ix_employees_aadhar", table_name="employees")
    op.drop_index("ix_employees_dealer_id", table_name="employees")
    op.drop_table("employees")
    op.drop_index("ix_dealers_company_name", table_name="dealers")
    op.drop_table("dealers")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
