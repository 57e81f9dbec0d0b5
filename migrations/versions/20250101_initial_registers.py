"""
Initial schema for the IMS registers.

Creates users, the six registers (audits, improvements, interested parties,
organisational context, maintenance, legal), document metadata and the
change log.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = 'initial_registers_20250101'
down_revision = None
branch_labels = None
depends_on = None


_TRACKED_TABLES = (
    'interested_parties',
    'organizational_context',
    'improvement_register',
    'audits',
    'maintenance_items',
    'legal_register',
)


def _uuid():
    return postgresql.UUID(as_uuid=True)


def _tracked_columns():
    return [
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('created_by_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('updated_by_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
    ]


def _rating_columns():
    return [
        sa.Column('initial_likelihood', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('initial_severity', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('residual_likelihood', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('residual_severity', sa.Integer(), nullable=False, server_default='3'),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='viewer'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("role in ('admin','editor','viewer')", name='ck_users_role'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'interested_parties',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('needs_expectations', sa.Text(), nullable=True),
        sa.Column('controls_recommendations', sa.Text(), nullable=True),
        *_rating_columns(),
        sa.Column('risk_level', sa.Integer(), nullable=False),
        sa.Column('residual_risk_level', sa.Integer(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        *_tracked_columns(),
    )
    op.create_index('idx_interested_parties_archived_order', 'interested_parties', ['archived', 'order'])

    op.create_table(
        'organizational_context',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('sub_category', sa.String(length=255), nullable=True),
        sa.Column('issue', sa.Text(), nullable=False),
        sa.Column('objectives', sa.Text(), nullable=True),
        sa.Column('controls_recommendations', sa.Text(), nullable=True),
        *_rating_columns(),
        sa.Column('initial_risk_level', sa.Integer(), nullable=False),
        sa.Column('residual_risk_level', sa.Integer(), nullable=False),
        *_tracked_columns(),
    )
    op.create_index('idx_organizational_context_category', 'organizational_context', ['category'])

    op.create_table(
        'improvement_register',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('number', sa.Integer(), nullable=False, unique=True),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('root_cause_type', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('corrective_action', sa.Text(), nullable=True),
        sa.Column('date_raised', sa.Date(), nullable=False),
        sa.Column('date_due', sa.Date(), nullable=True),
        sa.Column('date_completed', sa.Date(), nullable=True),
        sa.Column('internal_owner_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('external_owner', sa.String(length=255), nullable=True),
        *_tracked_columns(),
    )
    op.create_index('idx_improvement_register_category', 'improvement_register', ['category'])
    op.create_index('idx_improvement_register_date_completed', 'improvement_register', ['date_completed'])

    op.create_table(
        'audits',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('auditor_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('external_auditor', sa.String(length=255), nullable=True),
        sa.Column('planned_start_date', sa.Date(), nullable=True),
        sa.Column('actual_start_date', sa.Date(), nullable=True),
        sa.Column('follow_up_date', sa.Date(), nullable=True),
        sa.Column('date_completed', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='not_started'),
        *_tracked_columns(),
    )
    op.create_index('idx_audits_planned_start_date', 'audits', ['planned_start_date'])

    op.create_table(
        'audit_documents',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('audit_id', _uuid(), sa.ForeignKey('audits.id', ondelete='CASCADE'), nullable=False),
        sa.Column('doc_type', sa.String(length=20), nullable=False),
        sa.Column('doc_id', sa.Text(), nullable=False),
    )
    op.create_index('idx_audit_documents_audit_id', 'audit_documents', ['audit_id'])

    op.create_table(
        'maintenance_items',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('reference', sa.String(length=100), nullable=True),
        sa.Column('serial_number', sa.String(length=100), nullable=True),
        sa.Column('category', sa.String(length=20), nullable=False, server_default='maintenance'),
        sa.Column('sub_category', sa.String(length=100), nullable=True),
        sa.Column('supplier', sa.String(length=255), nullable=True),
        sa.Column('frequency', sa.String(length=100), nullable=True),
        sa.Column('action_required', sa.Text(), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('owner_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('allocated_to_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_tracked_columns(),
    )
    op.create_index('idx_maintenance_items_category_completed', 'maintenance_items', ['category', 'completed'])
    op.create_index('idx_maintenance_items_due_date', 'maintenance_items', ['due_date'])

    op.create_table(
        'legal_register',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('section', sa.String(length=255), nullable=True),
        sa.Column('legislation_url', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('compliance_notes', sa.Text(), nullable=True),
        sa.Column('approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_tracked_columns(),
    )
    op.create_index('idx_legal_register_archived_approved', 'legal_register', ['archived', 'approved'])

    op.create_table(
        'legal_reviews',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('entry_id', _uuid(), sa.ForeignKey('legal_register.id', ondelete='CASCADE'), nullable=False),
        sa.Column('review_date', sa.Date(), nullable=False),
        sa.Column('reviewed_by_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('idx_legal_reviews_entry_id_review_date', 'legal_reviews', ['entry_id', 'review_date'])

    op.create_table(
        'documents',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('content_type', sa.String(length=255), nullable=True),
        sa.Column('size_bytes', sa.Integer(), nullable=True),
        sa.Column('storage_key', sa.String(length=1024), nullable=False),
        sa.Column('uploaded_by_id', _uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('maintenance_item_id', _uuid(), sa.ForeignKey('maintenance_items.id', ondelete='CASCADE'), nullable=True),
        sa.Column('audit_id', _uuid(), sa.ForeignKey('audits.id', ondelete='CASCADE'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "(maintenance_item_id IS NOT NULL) <> (audit_id IS NOT NULL)",
            name='ck_documents_single_owner',
        ),
    )
    op.create_index('idx_documents_maintenance_item_id', 'documents', ['maintenance_item_id'])
    op.create_index('idx_documents_audit_id', 'documents', ['audit_id'])

    op.create_table(
        'change_log',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('actor_user_id', _uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('action_type', sa.Text(), nullable=False),
        sa.Column('target_type', sa.Text(), nullable=True),
        sa.Column('target_id', _uuid(), nullable=True),
        sa.Column('status', sa.Text(), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('metadata', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_change_log_actor_user_id_created_at', 'change_log', ['actor_user_id', 'created_at'])
    op.create_index('ix_change_log_target_type_target_id', 'change_log', ['target_type', 'target_id'])
    op.create_index('ix_change_log_action_type', 'change_log', ['action_type'])

    for table in _TRACKED_TABLES:
        op.create_index(f'ix_{table}_archived', table, ['archived'])


def downgrade() -> None:
    op.drop_table('change_log')
    op.drop_table('documents')
    op.drop_table('legal_reviews')
    op.drop_table('legal_register')
    op.drop_table('maintenance_items')
    op.drop_table('audit_documents')
    op.drop_table('audits')
    op.drop_table('improvement_register')
    op.drop_table('organizational_context')
    op.drop_table('interested_parties')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
