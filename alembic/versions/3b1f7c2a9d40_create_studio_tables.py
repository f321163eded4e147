"""create_studio_tables

Revision ID: 3b1f7c2a9d40
Revises:
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b1f7c2a9d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'campaigns',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('industry', sa.String(length=255), nullable=False),
        sa.Column('audience', sa.String(length=255), nullable=False),
        sa.Column('tone', sa.String(length=32), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_campaigns_created_at', 'campaigns', ['created_at'])

    op.create_table(
        'headlines',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('campaign_id', sa.String(length=36), sa.ForeignKey('campaigns.id'), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_headlines_campaign_id', 'headlines', ['campaign_id'])

    op.create_table(
        'images',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('image_url', sa.String(length=2048), nullable=False),
        sa.Column('prompt', sa.Text(), nullable=False),
        sa.Column('campaign_id', sa.String(length=36), sa.ForeignKey('campaigns.id'), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_images_campaign_id', 'images', ['campaign_id'])

    op.create_table(
        'creatives',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('campaign_id', sa.String(length=36), sa.ForeignKey('campaigns.id'), nullable=False),
        sa.Column('headline_id', sa.String(length=36), sa.ForeignKey('headlines.id'), nullable=False),
        sa.Column('image_id', sa.String(length=36), sa.ForeignKey('images.id'), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('headline_id', 'image_id', 'campaign_id', name='uq_creatives_headline_image_campaign'),
    )
    op.create_index('ix_creatives_campaign_id', 'creatives', ['campaign_id'])


def downgrade() -> None:
    op.drop_index('ix_creatives_campaign_id', table_name='creatives')
    op.drop_table('creatives')
    op.drop_index('ix_images_campaign_id', table_name='images')
    op.drop_table('images')
    op.drop_index('ix_headlines_campaign_id', table_name='headlines')
    op.drop_table('headlines')
    op.drop_index('ix_campaigns_created_at', table_name='campaigns')
    op.drop_table('campaigns')
