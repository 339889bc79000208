import importlib
import math
import threading
from types import SimpleNamespace

import pytest

from tests.params import params_entropy, params_tag_entropy as p
from tests.utils import FakeCatalog, FakeUser

TagEntropy = getattr(importlib.import_module('tagentropy.evaluation.metrics'), 'TagEntropy')
enums = importlib.import_module('tagentropy.utils.enums')


def make_accumulator(item_tags, list_size=10, **kwargs):
    data = SimpleNamespace(catalog=FakeCatalog(item_tags))
    return TagEntropy(list_size, **kwargs).make_accumulator("Test", data)


class FailingCatalog(FakeCatalog):
    def __init__(self, item_tags, failing_items):
        super().__init__(item_tags)
        self._failing_items = failing_items

    def get_item_tags(self, item):
        if item in self._failing_items:
            raise IOError(f"lookup failed for {item}")
        return super().get_item_tags(item)


class TestTagEntropyMetric:

    def test_column_labels(self):
        metric = TagEntropy(10)
        assert metric.name() == "TagEntropy"
        assert metric.get_column_labels() == ["TagEntropy@10"]
        assert metric.get_user_column_labels() == ["TagEntropy@10"]
        assert metric.list_size == 10

    def test_options_accept_values(self):
        acc = make_accumulator({}, aggregation="strict", entropy_formula="shannon")
        assert acc.state is enums.AccumulatorState.FRESH

    def test_unknown_option_raises(self):
        with pytest.raises(ValueError):
            TagEntropy(10, aggregation="median")

    def test_accumulators_have_their_own_vocabulary(self):
        metric = TagEntropy(5)
        data = SimpleNamespace(catalog=FakeCatalog({'A': ['comedy']}))
        acc_0 = metric.make_accumulator("Test", data)
        acc_1 = metric.make_accumulator("Test", data)
        acc_0.evaluate(FakeUser('u', [('A', 1.0)]))
        assert len(acc_0.vocabulary) == 1
        assert len(acc_1.vocabulary) == 0


class TestTagEntropyAccumulator:

    @pytest.mark.parametrize('params', p['scenarios'], ids=[s['id'] for s in p['scenarios']])
    def test_scenarios(self, params):
        acc = make_accumulator(params['item_tags'])
        result = acc.evaluate(FakeUser('u1', params['recommendations']))

        assert result.status is enums.ResultStatus.COMPUTED
        assert result.value == pytest.approx(params['expected'])
        assert acc.final_results() == {"TagEntropy@10": pytest.approx(params['expected'])}

    @pytest.mark.parametrize('recommendations', [None, []])
    def test_missing_list(self, recommendations):
        acc = make_accumulator({'A': ['comedy']})
        result = acc.evaluate(FakeUser('u1', recommendations))

        assert result.is_missing
        assert result.value is None
        assert math.isnan(result.as_row("TagEntropy@10")["TagEntropy@10"])
        assert acc.user_count == 0
        assert acc.state is enums.AccumulatorState.FRESH

    @pytest.mark.parametrize('params', p['aggregate'])
    def test_aggregate(self, params):
        acc = make_accumulator({'A': ['Action', 'action'], 'B': ['comedy']})
        for i, value in enumerate(params['values']):
            recs = [('A', 1.0)] if value else [('A', 1.0), ('B', 1.0)]
            assert acc.evaluate(FakeUser(f'u{i}', recs)).value == pytest.approx(value)
        assert acc.final_results()["TagEntropy@10"] == pytest.approx(params['expected'])

    def test_missing_users_do_not_change_the_aggregate(self):
        item_tags = {'A': ['Action', 'action'], 'B': ['comedy'], 'C': ['drama']}
        users = [FakeUser('u1', [('A', 1.0)]), FakeUser('u2', [('B', 1.0), ('C', 0.5)])]

        without_missing = make_accumulator(item_tags)
        [without_missing.evaluate(u) for u in users]

        with_missing = make_accumulator(item_tags)
        with_missing.evaluate(FakeUser('u0', None))
        [with_missing.evaluate(u) for u in users]
        with_missing.evaluate(FakeUser('u3', []))

        assert with_missing.final_results() == without_missing.final_results()

    def test_evaluate_is_deterministic(self):
        acc = make_accumulator({'A': ['comedy', 'drama'], 'B': ['Comedy'], 'C': []})
        user = FakeUser('u1', [('A', 1.0), ('B', 0.5), ('C', 0.1)])
        values = [acc.evaluate(user).value for _ in range(5)]
        assert len(set(values)) == 1

    def test_list_size_truncates_recommendations(self):
        acc = make_accumulator({'A': ['Action', 'action'], 'B': ['comedy']}, list_size=1)
        result = acc.evaluate(FakeUser('u1', [('A', 1.0), ('B', 0.5)]))
        assert result.value == pytest.approx(0.5)

    def test_failure_counts_as_zero_with_lenient_aggregation(self):
        acc = make_accumulator({'A': ['Action', 'action']})
        acc._catalog = FailingCatalog({'A': ['Action', 'action'], 'B': ['x']}, {'B'})

        ok = acc.evaluate(FakeUser('u1', [('A', 1.0)]))
        failed = acc.evaluate(FakeUser('u2', [('B', 1.0)]))

        assert failed.status is enums.ResultStatus.DEGRADED
        assert failed.value == 0.0
        assert acc.user_count == 2
        assert acc.final_results()["TagEntropy@10"] == pytest.approx(ok.value / 2)

    def test_failure_is_excluded_with_strict_aggregation(self):
        acc = make_accumulator({'A': ['Action', 'action']}, aggregation=enums.AggregationPolicy.STRICT)
        acc._catalog = FailingCatalog({'A': ['Action', 'action'], 'B': ['x']}, {'B'})

        ok = acc.evaluate(FakeUser('u1', [('A', 1.0)]))
        failed = acc.evaluate(FakeUser('u2', [('B', 1.0)]))

        assert failed.status is enums.ResultStatus.DEGRADED
        assert acc.user_count == 1
        assert acc.final_results()["TagEntropy@10"] == pytest.approx(ok.value)

    def test_strict_run_with_only_failures_is_accumulating(self):
        acc = make_accumulator({'A': ['comedy']}, aggregation=enums.AggregationPolicy.STRICT)
        acc._catalog = FailingCatalog({'A': ['comedy']}, {'A'})

        result = acc.evaluate(FakeUser('u1', [('A', 1.0)]))

        assert result.status is enums.ResultStatus.DEGRADED
        assert acc.user_count == 0
        assert acc.state is enums.AccumulatorState.ACCUMULATING
        assert math.isnan(acc.final_results()["TagEntropy@10"])

    @pytest.mark.parametrize('params', params_entropy['shannon_lists'],
                             ids=[s['id'] for s in params_entropy['shannon_lists']])
    def test_shannon_formula(self, params):
        acc = make_accumulator(params['item_tags'], entropy_formula=enums.EntropyFormula.SHANNON)
        result = acc.evaluate(FakeUser('u1', params['recommendations']))
        assert result.status is enums.ResultStatus.COMPUTED
        assert result.value == pytest.approx(params['expected'])

    def test_malformed_tags_degrade(self):
        acc = make_accumulator({'A': ['comedy', 42]})
        result = acc.evaluate(FakeUser('u1', [('A', 1.0)]))
        assert result.status is enums.ResultStatus.DEGRADED
        assert result.as_row("TagEntropy@10") == {"TagEntropy@10": 0.0}

    def test_final_results_without_users_is_nan(self):
        acc = make_accumulator({'A': ['comedy']})
        acc.evaluate(FakeUser('u1', None))
        assert math.isnan(acc.final_results()["TagEntropy@10"])
        assert acc.state is enums.AccumulatorState.FINALIZED

    def test_state_machine(self):
        acc = make_accumulator({'A': ['comedy']})
        assert acc.state is enums.AccumulatorState.FRESH
        acc.evaluate(FakeUser('u1', [('A', 1.0)]))
        assert acc.state is enums.AccumulatorState.ACCUMULATING
        acc.final_results()
        assert acc.state is enums.AccumulatorState.FINALIZED
        with pytest.raises(RuntimeError):
            acc.evaluate(FakeUser('u2', [('A', 1.0)]))

    def test_merge_partial_accumulators(self):
        item_tags = {'A': ['Action', 'action'], 'B': ['comedy']}
        users = [FakeUser('u1', [('A', 1.0)]), FakeUser('u2', [('A', 1.0), ('B', 1.0)]),
                 FakeUser('u3', [('A', 1.0)]), FakeUser('u4', None)]

        single = make_accumulator(item_tags)
        [single.evaluate(u) for u in users]

        left, right = make_accumulator(item_tags), make_accumulator(item_tags)
        [left.evaluate(u) for u in users[:2]]
        [right.evaluate(u) for u in users[2:]]
        left.merge(right)

        assert left.user_count == single.user_count
        assert left.final_results()["TagEntropy@10"] == pytest.approx(single.final_results()["TagEntropy@10"])

    def test_concurrent_evaluation(self):
        item_tags = {f'i{n}': [f'tag_{n % 7}', f'tag_{n % 3}'] for n in range(20)}
        acc = make_accumulator(item_tags)
        users = [FakeUser(f'u{n}', [(f'i{(n + j) % 20}', 1.0) for j in range(3)]) for n in range(40)]

        def worker(chunk):
            for user in chunk:
                acc.evaluate(user)

        threads = [threading.Thread(target=worker, args=(users[n::4],)) for n in range(4)]
        [th.start() for th in threads]
        [th.join() for th in threads]

        sequential = make_accumulator(item_tags)
        [sequential.evaluate(u) for u in users]

        assert acc.user_count == 40
        assert acc.final_results()["TagEntropy@10"] == pytest.approx(sequential.final_results()["TagEntropy@10"])


if __name__ == '__main__':
    pytest.main()
