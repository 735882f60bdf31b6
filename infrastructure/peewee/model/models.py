from peewee import AutoField, CharField, DateTimeField, Model, TextField
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = AutoField()
    title = CharField()
    description = TextField(null=True)
    status = CharField()
    due_date = DateTimeField(null=True)
    created_at = DateTimeField()
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
