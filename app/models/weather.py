from app.extensions import db


class Weather(db.Model):
    __tablename__ = 'weathers'

    id = db.Column(db.Integer, primary_key=True)
    forecast = db.Column(db.Text)
    time = db.Column(db.String(32))
    location_id = db.Column(db.Integer, db.ForeignKey('locations.id'), nullable=False, index=True)

    location = db.relationship('Location', back_populates='weathers')

    @classmethod
    def from_record(cls, record, location_id):
        return cls(
            forecast=record['forecast'],
            time=record['time'],
            location_id=location_id,
        )

    def to_dict(self):
        return {
            'forecast': self.forecast,
            'time': self.time,
            'location_id': self.location_id,
        }
