from app.extensions import db


class Event(db.Model):
    __tablename__ = 'events'

    id = db.Column(db.Integer, primary_key=True)
    link = db.Column(db.String(2048))
    event_name = db.Column(db.String(512))
    event_date = db.Column(db.String(32))
    summary = db.Column(db.Text)
    location_id = db.Column(db.Integer, db.ForeignKey('locations.id'), nullable=False, index=True)

    location = db.relationship('Location', back_populates='events')

    @classmethod
    def from_record(cls, record, location_id):
        return cls(
            link=record['link'],
            event_name=record['name'],
            event_date=record['event_date'],
            summary=record['summary'],
            location_id=location_id,
        )

    def to_dict(self):
        return {
            'link': self.link,
            'name': self.event_name,
            'event_date': self.event_date,
            'summary': self.summary,
            'location_id': self.location_id,
        }
