#!/usr/bin/env python3
"""Downloadable CSV templates for the bulk job types."""

from typing import Dict, Union

from .schemas import JobType, SchemaRegistry

TEMPLATE_MIME_TYPE = 'text/csv'


class TemplateGenerator:
    """Render a header line plus one static example line per job type."""

    EXAMPLE_ROWS: Dict[JobType, str] = {
        JobType.CATEGORY: 'Wandtegels Badkamer,"wandtegels, badkamer, modern",Moderne wandtegels voor je badkamer,123',
        JobType.FILTER: 'kranen/regendouche/kleur/chroom,262,regendouche,"chroom kraan, regendouche",TEMPLATE_KRANEN',
        JobType.CMS: 'badkamer-inspiratie,Badkamer Inspiratie 2026,"badkamer, inspiratie, trends",',
    }

    def generate_template(self, job_type: Union[JobType, str]) -> str:
        job_type = JobType.coerce(job_type)
        header = ','.join(SchemaRegistry.all_columns(job_type))
        return f"{header}\n{self.EXAMPLE_ROWS[job_type]}"

    @staticmethod
    def template_filename(job_type: Union[JobType, str]) -> str:
        return f"template_{JobType.coerce(job_type).value}.csv"
