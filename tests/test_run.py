import importlib
import shutil
from pathlib import Path

import pandas as pd
import pytest
import yaml

from tests.params import params_dataset_loader, params_evaluator

run_evaluation = getattr(importlib.import_module('tagentropy.run'), 'run_evaluation')
fixtures = params_dataset_loader['tag_entropy'][0]['folder_path']


def write_config(tmp_path, folder=fixtures, header=False, suffix='.yml', **evaluation):
    config = {
        'experiment': {
            'dataset': 'tag_entropy',
            'data_config': {
                'train_path': folder + '/train.tsv',
                'test_path': folder + '/test.tsv',
                'header': header,
                'side_information': {
                    'tag_path': folder + '/tags.tsv',
                    'item_path': folder + '/items.tsv'
                }
            },
            'evaluation': {'simple_metrics': ['TagEntropy'], 'cutoffs': [2, 3], **evaluation},
            'models': {'RecommendationFolder': {'folder': folder + '/recs'}},
            'top_k': 3,
            'print_results_as_triplets': True,
            'path_output_rec_performance': str(tmp_path / 'performance'),
            'path_log_folder': str(tmp_path / 'log')
        }
    }
    config_path = tmp_path / f'tag_entropy{suffix}'
    config_path.write_text(yaml.safe_dump(config))
    return str(config_path)


def fixtures_with_header(tmp_path):
    folder = tmp_path / 'data'
    shutil.copytree(fixtures, folder)
    headers = {'train.tsv': 'userId\titemId\trating\ttimestamp', 'test.tsv': 'userId\titemId\trating\ttimestamp',
               'tags.tsv': 'itemId\ttag', 'items.tsv': 'itemId',
               'recs/ItemKNN.tsv': 'userId\titemId\tscore', 'recs/MostPop.tsv': 'userId\titemId\tscore'}
    for name, header in headers.items():
        path = folder / name
        path.write_text(header + '\n' + path.read_text())
    return str(folder)


def best_results(tmp_path, k):
    [path] = list(Path(tmp_path / 'performance').glob(f'rec_cutoff_{k}_*.tsv'))
    return pd.read_csv(path, sep='\t').set_index('model')


def test_run_evaluation_writes_results(tmp_path):
    res_handler = run_evaluation(write_config(tmp_path, paired_ttest=True))
    performance = tmp_path / 'performance'

    assert sorted(res_handler.oneshot_recommenders.keys()) == ['ItemKNN', 'MostPop']
    assert res_handler.ks == [2, 3]

    best = best_results(tmp_path, 2)
    assert best.loc['ItemKNN', 'TagEntropy@2'] == pytest.approx(params_evaluator['ItemKNN'][0]['expected'])
    assert best.loc['MostPop', 'TagEntropy@2'] == pytest.approx(params_evaluator['MostPop'][0]['expected'])

    [per_user_3] = list(performance.glob('per_user_cutoff_3_*.tsv'))
    per_user = pd.read_csv(per_user_3, sep='\t')
    assert list(per_user.columns) == ['user', 'model', 'TagEntropy@3']
    assert per_user.shape[0] == 8

    assert len(list(performance.glob('triplets_rec_cutoff_*.tsv'))) == 2
    assert len(list(performance.glob('stat_paired_ttest_cutoff_*.tsv'))) == 2
    assert (tmp_path / 'log' / 'tagentropy.log').exists()


def test_run_evaluation_accepts_yaml_suffix(tmp_path):
    res_handler = run_evaluation(write_config(tmp_path, suffix='.yaml'))
    assert res_handler.ks == [2, 3]


def test_run_evaluation_with_header_rows(tmp_path):
    run_evaluation(write_config(tmp_path, folder=fixtures_with_header(tmp_path), header=True))

    best = best_results(tmp_path, 3)
    assert best.loc['MostPop', 'TagEntropy@3'] == pytest.approx(params_evaluator['MostPop'][1]['expected'],
                                                                abs=1e-6)
    assert best_results(tmp_path, 2).loc['ItemKNN', 'TagEntropy@2'] == pytest.approx(1 / 3)


def test_run_evaluation_with_overrides(tmp_path):
    res_handler = run_evaluation(write_config(tmp_path), ['experiment.evaluation.cutoffs=[2]'])
    assert res_handler.ks == [2]


def test_run_evaluation_rejects_cutoff_above_top_k(tmp_path):
    with pytest.raises(ValueError, match="Cutoff values must be smaller"):
        run_evaluation(write_config(tmp_path), ['experiment.evaluation.cutoffs=[5]'])


def test_run_evaluation_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_evaluation(str(tmp_path / 'missing.yml'))


if __name__ == '__main__':
    pytest.main()
