import pytest

from dental_clinic.application.ports.appointments_repo import DoctorDto
from dental_clinic.application.services.doctors_service import DoctorsService


class FakeDoctors:
    def __init__(self):
        self.doctors = []

    def list(self, only_available=False):
        return [d for d in self.doctors if d.is_available or not only_available]

    def get(self, doctor_id):
        return next((d for d in self.doctors if d.id == doctor_id), None)

    def create(self, name, specialization, is_available):
        d = DoctorDto(id=f"doc-{len(self.doctors) + 1}", name=name, specialization=specialization, is_available=is_available)
        self.doctors.append(d)
        return d


def test_register_and_filter_available():
    svc = DoctorsService(repo=FakeDoctors())
    svc.register("  Dr. Incisor ", "Orthodontics")
    svc.register("Dr. Away", None, is_available=False)
    assert [d.name for d in svc.list()] == ["Dr. Incisor", "Dr. Away"]
    assert [d.name for d in svc.list(only_available=True)] == ["Dr. Incisor"]


def test_register_requires_name():
    svc = DoctorsService(repo=FakeDoctors())
    with pytest.raises(Exception):
        svc.register(" ", None)


def test_get_missing_doctor():
    svc = DoctorsService(repo=FakeDoctors())
    with pytest.raises(Exception):
        svc.get("doc-404")
