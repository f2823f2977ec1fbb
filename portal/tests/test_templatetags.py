import datetime

from portal.templatetags.infocare import data_br, data_hora_br, data_input, rotulo_status


def test_dates_are_read_in_utc():
    assert data_br('2024-05-02T00:00:00.000Z') == '02/05/2024'
    assert data_input('1950-03-12T00:00:00.000Z') == '1950-03-12'
    assert data_br(datetime.date(2024, 5, 2)) == '02/05/2024'


def test_date_time_is_local(settings):
    assert data_hora_br('2024-05-02T01:30:00.000Z') == '01/05/2024 22:30'
    settings.TIME_ZONE = 'UTC'
    assert data_hora_br('2024-05-02T01:30:00.000Z') == '02/05/2024 01:30'


def test_naive_timestamps_are_utc():
    assert data_hora_br('2024-05-02T12:00:00') == '02/05/2024 09:00'


def test_unparseable_values_render_empty():
    assert data_br(None) == ''
    assert data_br('ontem') == ''
    assert data_hora_br('2024-13-45T00:00:00Z') == ''


def test_status_labels():
    assert rotulo_status('ATIVA') == 'Ativa'
    assert rotulo_status('pendente') == 'Pendente'
    assert rotulo_status('OUTRO') == 'OUTRO'
