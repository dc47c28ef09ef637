from app.extensions import db


class Movie(db.Model):
    __tablename__ = 'movies'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(512))
    overview = db.Column(db.Text)
    average_votes = db.Column(db.Float)
    total_votes = db.Column(db.Integer)
    image_url = db.Column(db.String(2048))
    popularity = db.Column(db.Float)
    released_on = db.Column(db.String(32))
    location_id = db.Column(db.Integer, db.ForeignKey('locations.id'), nullable=False, index=True)

    location = db.relationship('Location', back_populates='movies')

    @classmethod
    def from_record(cls, record, location_id):
        return cls(
            title=record['title'],
            overview=record['overview'],
            average_votes=record['average_votes'],
            total_votes=record['total_votes'],
            image_url=record['image_url'],
            popularity=record['popularity'],
            released_on=record['released_on'],
            location_id=location_id,
        )

    def to_dict(self):
        return {
            'title': self.title,
            'overview': self.overview,
            'average_votes': self.average_votes,
            'total_votes': self.total_votes,
            'image_url': self.image_url,
            'popularity': self.popularity,
            'released_on': self.released_on,
            'location_id': self.location_id,
        }
