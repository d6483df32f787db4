#!/usr/bin/env python

from ehr.config_file import DatabaseConfig, FormConfig, MultiValueFieldConfig

database: DatabaseConfig = DatabaseConfig(
    host     = 'DBHOST',
    username = 'DBUSER',
    password = 'DBPASS',
    database = 'DBNAME',
    port     = 5432,
)

# Uncomment this statement to regenerate temporary document URIs from the S3 bucket.
# s3: S3Config = S3Config(
#     aws_access_key_id     = 'AWS_ACCESS_KEY_ID',
#     aws_secret_access_key = 'AWS_SECRET_ACCESS_KEY',
#     aws_s3_bucket_name    = 'AWS_S3_BUCKET_NAME',
#     aws_s3_endpoint_url   = 'AWS_S3_ENDPOINT',
#     aws_s3_region_name    = 'AWS_S3_REGION',
# )

form: FormConfig = FormConfig(
    hidden_columns     = ['version', 'created_at', 'last_edited'],
    multi_value_fields = [
        MultiValueFieldConfig('last_meal_types', 'lastmealtype'),
    ],
)
